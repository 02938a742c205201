# src/ghuser_kit/observability/names.py

"""Standard metric names for ghuser-kit observability.

Use these constants instead of hardcoded strings so every backend sees the
same names.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# CSV Parser Metrics
# ============================================================================

# Duration
CSV_PARSE_DURATION = "csv_parse_duration"

# Counters
CSV_ROWS_PARSED = "csv_rows_parsed"


# ============================================================================
# Decoding Metrics
# ============================================================================

# Counters (labelled with kind="base64" or kind="percent")
DECODE_ERRORS_TOTAL = "decode_errors_total"


# ============================================================================
# GitHub Users API Metrics
# ============================================================================

# Duration
GITHUB_REQUEST_DURATION = "github_request_duration"

# Counters
GITHUB_REQUESTS_TOTAL = "github_requests_total"
GITHUB_ERRORS_TOTAL = "github_errors_total"
