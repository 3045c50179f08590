"""Diffhunk-specific exceptions."""


class DiffhunkInputError(Exception):
    """Raised when a change-record payload or diff on the input cannot be read.

    The parsing core never raises this: a malformed hunk degrades to fewer
    hunks.  Only the record loaders reject input they cannot make sense of.
    """
