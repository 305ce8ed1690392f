"""Names shared across the proxy pipeline."""

SERVICE_NAME = "teamwork_gateway_service"
UPSTREAM_NAME = "teamwork"

PAGE_HEADER = "X-Page"
TOTAL_PAGES_HEADER = "X-Pages"
PAGE_PARAM = "page"
