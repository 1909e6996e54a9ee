"""
Centralized constants for the application.
Stores regex patterns, date formats, HTTP header names and other magic values.
"""

from typing import Dict, List

# --- Validation Patterns ---

EMAIL_PATTERN = (
    r"\b(^[_A-Za-z0-9-]+(\.[_A-Za-z0-9-]+)*@([A-Za-z0-9-])"
    r"+(\.[A-Za-z0-9-]+)*((\.[A-Za-z0-9]{2,})|(\.[A-Za-z0-9]{2,}\.[A-Za-z0-9]{2,}))$)\b"
)
DOMAIN_PATTERN = r"^((http://)|(https://))?([a-zA-Z0-9]([a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,6}"
IP_PATTERN = r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}"
MOBILE_PATTERN = r"^1[3456789]\d{9}$"

# Carrier number segments (mainland China)
CARRIER_PATTERNS: Dict[str, str] = {
    'MOBILE': r"^134[0-8]\d{7}$|^(?:13[5-9]|147|15[0-27-9]|178|18[2-478])\d{8}$",
    'CHINA_UNICOM': r"^(?:13[0-2]|145|15[56]|176|175|166|18[56])\d{8}$",
    'TELECOM': r"^(?:199|173|133|153|177|18[019])\d{8}$",
}

# --- Date Formats ---

# Tried in order by commons.dates.parse_date
DATE_PATTERNS: List[str] = [
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H',
    '%Y-%m-%d',
    '%Y/%m/%d',
]
COMPACT_DATETIME_FORMAT = '%Y%m%d%H%M%S'
DATE_FORMAT = '%Y-%m-%d'

# --- HTTP Headers ---

HEADER_EXPIRES = 'Expires'
HEADER_CACHE_CONTROL = 'Cache-Control'
HEADER_PRAGMA = 'Pragma'
HEADER_CONTENT_DISPOSITION = 'Content-Disposition'
HEADER_LAST_MODIFIED = 'Last-Modified'
HEADER_ETAG = 'ETag'
HEADER_IF_MODIFIED_SINCE = 'If-Modified-Since'
HEADER_IF_NONE_MATCH = 'If-None-Match'
HEADER_ACCEPT = 'Accept'
HEADER_X_REQUESTED_WITH = 'X-Requested-With'
HEADER_USER_AGENT = 'User-Agent'
HEADER_ACCESS_CONTROL_REQUEST_HEADERS = 'Access-Control-Request-Headers'

HTTP_NOT_MODIFIED = 304

# --- Content Types ---

# Overrides for extensions the platform mimetypes table gets wrong or lacks
CONTENT_TYPE_OVERRIDES: Dict[str, str] = {
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'png': 'image/png',
    'gif': 'image/gif',
    'webp': 'image/webp',
    'm4a': 'audio/mp4',
    'amr': 'audio/amr',
    'mp3': 'audio/mpeg',
    'wav': 'audio/wav',
    'json': 'application/json',
    'js': 'application/javascript',
    'xlsx': 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
}

# --- I/O ---

BUFFER_SIZE = 10240
