from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class OpType(str, Enum):
    INDEX = "index"
    CREATE = "create"


@dataclass(frozen=True)
class StructuredPayload:
    """
    A document serialized to JSON at encode time.
    """
    value: Any


@dataclass(frozen=True)
class RawBytesPayload:
    """
    Pre-serialized JSON document, emitted verbatim.
    """
    data: bytes


@dataclass(frozen=True)
class RawStringPayload:
    """
    Pre-serialized JSON document, emitted verbatim.
    """
    text: str


Payload = Union[StructuredPayload, RawBytesPayload, RawStringPayload]
