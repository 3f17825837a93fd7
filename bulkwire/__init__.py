from .base import BulkableRequest
from .config import EncoderConfig
from .errors import BulkwireError, EncodingError
from .models import OpType, RawBytesPayload, RawStringPayload, StructuredPayload
from .request import BulkIndexRequest

__all__ = [
    "BulkableRequest",
    "BulkIndexRequest",
    "EncoderConfig",
    "OpType",
    "StructuredPayload",
    "RawBytesPayload",
    "RawStringPayload",
    "BulkwireError",
    "EncodingError",
]
