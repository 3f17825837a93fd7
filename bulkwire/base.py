import logging
from abc import ABC, abstractmethod

from .errors import EncodingError

logger = logging.getLogger(__name__)


class BulkableRequest(ABC):
    """
    Abstract base for requests that can be part of a bulk body.
    Each request encodes itself into its own NDJSON lines; joining many
    requests into one body is left to the caller.
    """

    @abstractmethod
    def source(self) -> tuple[str, ...]:
        """Return the on-wire lines of this request. Raises EncodingError."""
        ...

    def __str__(self) -> str:
        """
        Render the request as a single string, lines joined by newlines.
        Intended for logging and debugging: encoding failures are rendered
        as an "error: ..." placeholder instead of being raised.
        """
        try:
            lines = self.source()
        except EncodingError as exc:
            logger.debug("Rendering %s failed: %s", type(self).__name__, exc)
            return f"error: {exc}"
        return "\n".join(lines)
