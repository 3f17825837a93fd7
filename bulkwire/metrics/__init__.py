from .registry import ENCODE_CACHE_HITS_TOTAL, ENCODE_LATENCY_SECONDS, ENCODE_TOTAL


def observe_encode(op_type: str, status: str, latency_s: float) -> None:
    """
    Record one cache-miss encode.

    Latency is recorded for both outcomes; status is "success" or "error".
    """
    ENCODE_TOTAL.labels(op_type=op_type, status=status).inc()
    ENCODE_LATENCY_SECONDS.labels(op_type=op_type).observe(latency_s)


def observe_cache_hit(op_type: str) -> None:
    """Record an encode answered from the memoized lines."""
    ENCODE_CACHE_HITS_TOTAL.labels(op_type=op_type).inc()


__all__ = [
    "ENCODE_TOTAL",
    "ENCODE_LATENCY_SECONDS",
    "ENCODE_CACHE_HITS_TOTAL",
    "observe_encode",
    "observe_cache_hit",
]
