"""Constants for the request/response lifecycle.

Centralizes HTTP-related constants to avoid duplication across modules.
"""

# HTTP Status Code Ranges
HTTP_STATUS_ERROR_MIN = 400
HTTP_STATUS_ERROR_MAX = 600

# Header names
HEADER_CONTENT_TYPE = "content-type"
HEADER_CONTENT_LENGTH = "content-length"

# Response content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_XML = "application/xml"
CONTENT_TYPE_XML_TEXT = "text/xml"
CONTENT_TYPE_HTML = "text/html"
CONTENT_TYPE_SCRIPT = "script"

TEXT_CONTENT_TYPES = frozenset(
    {
        CONTENT_TYPE_XML,
        CONTENT_TYPE_XML_TEXT,
        CONTENT_TYPE_HTML,
        CONTENT_TYPE_SCRIPT,
    }
)

# Defaults
DEFAULT_ENCODING = "utf8"

# Chunk size for streaming reads
DEFAULT_CHUNK_SIZE = 8192
