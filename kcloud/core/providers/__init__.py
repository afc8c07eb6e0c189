"""kcloud providers."""
