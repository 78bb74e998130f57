class DataStoreError(Exception):
    """Raised when a data-store connection or query fails."""
