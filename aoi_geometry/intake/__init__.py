"""AOI intake helpers called by imagery-request and saved-AOI handlers."""
