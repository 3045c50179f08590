"""Parse unified-diff hunks and rebuild file content from them."""
