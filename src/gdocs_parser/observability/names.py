# src/gdocs_parser/observability/names.py

"""Standard metric names for gdocs-parser observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
PARSE_SECTIONS_TOTAL = "parse_sections_total"
PARSE_PARAGRAPHS_TOTAL = "parse_paragraphs_total"


# ============================================================================
# Document Source Metrics
# ============================================================================

# Duration
FETCH_DURATION = "fetch_duration"

# Counters
FETCH_REQUESTS_TOTAL = "fetch_requests_total"
FETCH_ERRORS_TOTAL = "fetch_errors_total"
