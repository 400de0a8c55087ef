"""External tool wrappers for authscout."""
