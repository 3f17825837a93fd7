from prometheus_client import Counter, Histogram

ENCODE_TOTAL = Counter(
    "bulkwire_encode_total",
    "Bulk request encodes, by op type and outcome",
    ["op_type", "status"],
)

ENCODE_LATENCY_SECONDS = Histogram(
    "bulkwire_encode_latency_seconds",
    "Time spent encoding a bulk request on a cache miss",
    ["op_type"],
    buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)

ENCODE_CACHE_HITS_TOTAL = Counter(
    "bulkwire_encode_cache_hits_total",
    "Bulk request encodes served from the memoized lines",
    ["op_type"],
)
