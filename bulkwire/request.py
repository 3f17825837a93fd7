from __future__ import annotations

import dataclasses
import json
import logging
import time
from typing import Any, Optional, Union

from .base import BulkableRequest
from .config import EncoderConfig
from .errors import EncodingError
from .metrics import observe_cache_hit, observe_encode
from .models import OpType, Payload, RawBytesPayload, RawStringPayload, StructuredPayload

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT = "{}"


def _to_payload(doc: Any) -> Optional[Payload]:
    if doc is None:
        return None
    if isinstance(doc, (StructuredPayload, RawBytesPayload, RawStringPayload)):
        return doc
    if isinstance(doc, (bytes, bytearray, memoryview)):
        return RawBytesPayload(bytes(doc))
    if isinstance(doc, str):
        return RawStringPayload(doc)
    return StructuredPayload(doc)


def _json_default(obj: Any) -> Any:
    # Dataclass documents serialize field by field, in declaration order.
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class BulkIndexRequest(BulkableRequest):
    """
    A single-document write (index or create) for a bulk request body.

    Configure it with chained setters, then call source() to get the
    action-and-metadata line and the document line:

        request = (
            BulkIndexRequest()
            .op_type("create")
            .index("index101")
            .type("employee")
            .id("1")
            .doc({"user": "olivere"})
        )
        action, document = request.source()

    The encoded lines are memoized; every setter discards them.
    Instances are not thread-safe.
    """

    def __init__(self, config: EncoderConfig | None = None) -> None:
        self.config = config or EncoderConfig()
        self._op_type: str = self.config.default_op_type
        self._index: Optional[str] = None
        self._type: Optional[str] = None
        self._id: Optional[str] = None
        self._routing: Optional[str] = None
        self._parent: Optional[str] = None
        self._version: int = 0
        self._version_type: Optional[str] = None
        self._retry_on_conflict: Optional[int] = None
        self._ttl: Optional[str] = None
        self._pipeline: Optional[str] = None
        self._payload: Optional[Payload] = None
        self._source: Optional[tuple[str, str]] = None

    def _invalidate(self) -> None:
        self._source = None

    def index(self, index: str) -> BulkIndexRequest:
        """Target index. If unset, the caller's bulk-level index applies."""
        self._index = index
        self._invalidate()
        return self

    def type(self, typ: str) -> BulkIndexRequest:
        """Document type. If unset, the caller's bulk-level type applies."""
        self._type = typ
        self._invalidate()
        return self

    def id(self, id: str) -> BulkIndexRequest:
        self._id = id
        self._invalidate()
        return self

    def op_type(self, op_type: Union[str, OpType]) -> BulkIndexRequest:
        """
        Select create-only ("create") or upsert ("index") behavior.

        The value is not checked against OpType; unknown op types are left
        for the server to reject. An empty op type restores the configured
        default.
        """
        if isinstance(op_type, OpType):
            op_type = op_type.value
        self._op_type = op_type or self.config.default_op_type
        self._invalidate()
        return self

    def routing(self, routing: str) -> BulkIndexRequest:
        self._routing = routing
        self._invalidate()
        return self

    def parent(self, parent: str) -> BulkIndexRequest:
        """Identifier of the parent document, if any."""
        self._parent = parent
        self._invalidate()
        return self

    def version(self, version: int) -> BulkIndexRequest:
        """
        Document version for optimistic concurrency control.
        Only strictly positive versions are sent.
        """
        self._version = version
        self._invalidate()
        return self

    def version_type(self, version_type: str) -> BulkIndexRequest:
        """How versions are checked, e.g. internal, external, external_gte or force."""
        self._version_type = version_type
        self._invalidate()
        return self

    def doc(self, doc: Any) -> BulkIndexRequest:
        """
        Document to write.

        bytes and str are taken as already-serialized JSON and sent as-is;
        any other value is serialized to JSON when the request is encoded.
        None clears the document, which then encodes as an empty object.
        """
        self._payload = _to_payload(doc)
        self._invalidate()
        return self

    def retry_on_conflict(self, retry_on_conflict: int) -> BulkIndexRequest:
        """How often to retry on a version conflict. Zero is sent as well."""
        self._retry_on_conflict = retry_on_conflict
        self._invalidate()
        return self

    def ttl(self, ttl: str) -> BulkIndexRequest:
        """Expiration time of the document, e.g. "1m"."""
        self._ttl = ttl
        self._invalidate()
        return self

    def pipeline(self, pipeline: str) -> BulkIndexRequest:
        """Ingest pipeline to run on the document."""
        self._pipeline = pipeline
        self._invalidate()
        return self

    def source(self) -> tuple[str, str]:
        """
        Return the on-wire representation of the request: the
        action-and-metadata line and the document line.

            {"index":{"_id":"1","_index":"test","_type":"type1"}}
            {"field1":"value1"}

        Raises EncodingError if the document cannot be serialized.
        """
        if self._source is not None:
            observe_cache_hit(self._op_type)
            return self._source

        start_time = time.monotonic()
        status = "success"
        try:
            lines = (self._action_line(), self._document_line())
        except Exception:
            status = "error"
            raise
        finally:
            latency = time.monotonic() - start_time
            observe_encode(self._op_type, status, latency)

        logger.debug("Encoded %s request for index=%r id=%r", self._op_type, self._index, self._id)
        self._source = lines
        return lines

    def _action(self) -> dict[str, Any]:
        action: dict[str, Any] = {}
        if self._index:
            action["_index"] = self._index
        if self._type:
            action["_type"] = self._type
        if self._id:
            action["_id"] = self._id
        if self._routing:
            action["_routing"] = self._routing
        if self._parent:
            action["_parent"] = self._parent
        if self._version > 0:
            action["_version"] = self._version
        if self._version_type:
            action["_version_type"] = self._version_type
        if self._retry_on_conflict is not None:
            action["_retry_on_conflict"] = self._retry_on_conflict
        if self._ttl:
            action["_ttl"] = self._ttl
        if self._pipeline:
            action["pipeline"] = self._pipeline
        return action

    def _action_line(self) -> str:
        # Consumers compare action lines byte for byte, so keys are always sorted.
        return json.dumps(
            {self._op_type: self._action()},
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=self.config.ensure_ascii,
        )

    def _document_line(self) -> str:
        payload = self._payload
        if payload is None:
            return EMPTY_DOCUMENT
        if isinstance(payload, RawStringPayload):
            return payload.text
        if isinstance(payload, RawBytesPayload):
            return payload.data.decode("utf-8", errors="surrogateescape")
        try:
            return json.dumps(
                payload.value,
                separators=(",", ":"),
                ensure_ascii=self.config.ensure_ascii,
                allow_nan=self.config.allow_nan,
                default=_json_default,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            raise EncodingError(f"cannot serialize document: {exc}") from exc
