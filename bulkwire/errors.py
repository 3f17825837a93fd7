class BulkwireError(Exception):
    """Base exception for bulkwire errors."""


class EncodingError(BulkwireError):
    """Failed to serialize a bulk request payload."""
