"""
HTTP header helpers for request inspection and response caching headers.

Works on plain header mappings so it can sit behind any web framework.
Request headers are looked up case-insensitively; response headers are
written into the mutable mapping passed in (a `CaseInsensitiveDict` is
created when none is given).
"""

import time
from email.utils import formatdate, parsedate_to_datetime
from typing import Any, Dict, Mapping, MutableMapping, Optional, Tuple
from urllib.parse import quote

from requests.structures import CaseInsensitiveDict

from config.constants import (
    HEADER_EXPIRES,
    HEADER_CACHE_CONTROL,
    HEADER_PRAGMA,
    HEADER_CONTENT_DISPOSITION,
    HEADER_LAST_MODIFIED,
    HEADER_ETAG,
    HEADER_IF_MODIFIED_SINCE,
    HEADER_IF_NONE_MATCH,
    HEADER_ACCEPT,
    HEADER_X_REQUESTED_WITH,
    HEADER_USER_AGENT,
    HEADER_ACCESS_CONTROL_REQUEST_HEADERS,
    HTTP_NOT_MODIFIED,
)
from commons.logger import setup_logger

logger = setup_logger('web')

HeaderMap = MutableMapping[str, str]


def _as_headers(headers: Optional[Mapping[str, str]]) -> CaseInsensitiveDict:
    if isinstance(headers, CaseInsensitiveDict):
        return headers
    return CaseInsensitiveDict(headers or {})


def _response_headers(headers: Optional[HeaderMap]) -> HeaderMap:
    return CaseInsensitiveDict() if headers is None else headers


def http_date(timestamp: float) -> str:
    """Format an epoch timestamp (seconds) as an RFC 7231 date."""
    return formatdate(timestamp, usegmt=True)


# =============================================================================
# REQUEST INSPECTION
# =============================================================================

def is_json_request(
    headers: Optional[Mapping[str, str]],
    params: Optional[Mapping[str, Any]] = None
) -> bool:
    """
    Decide whether the client expects a JSON response.

    True when:
      - X-Requested-With ends with XMLHttpRequest or names the APICloud loader
      - Access-Control-Request-Headers mentions x-requested-with (CORS preflight)
      - User-Agent mentions apicloud
      - Accept (header, or `Accept` query parameter) contains x-json

    Args:
        headers: Request headers
        params: Request query/form parameters

    Returns:
        True if a JSON response is requested
    """
    request_headers = _as_headers(headers)

    requested_with = (request_headers.get(HEADER_X_REQUESTED_WITH) or '').lower()
    if requested_with.endswith('xmlhttprequest'):
        return True
    if 'com.apicloud.apploader' in requested_with:
        return True

    preflight = request_headers.get(HEADER_ACCESS_CONTROL_REQUEST_HEADERS) or ''
    if 'x-requested-with' in preflight:
        return True

    user_agent = (request_headers.get(HEADER_USER_AGENT) or '').lower()
    if 'apicloud' in user_agent:
        return True

    accept = request_headers.get(HEADER_ACCEPT)
    if not accept or not accept.strip():
        accept = (params or {}).get(HEADER_ACCEPT)
        if isinstance(accept, (list, tuple)):
            accept = accept[0] if accept else None
        if not accept or not str(accept).strip():
            return False

    return 'x-json' in str(accept).lower()


def parameters_starting_with(
    params: Optional[Mapping[str, Any]],
    prefix: Optional[str]
) -> Dict[str, Any]:
    """
    Collect parameters sharing a prefix, with the prefix stripped from the keys.

    Multi-valued parameters keep their list, single values are unwrapped and
    parameters without values are dropped. Keys come back sorted.
    """
    prefix = prefix or ''
    result = {}
    for name in sorted((params or {}).keys()):
        if prefix and not name.startswith(prefix):
            continue
        values = params[name]
        if isinstance(values, (list, tuple)):
            if len(values) == 0:
                continue
            value = list(values) if len(values) > 1 else values[0]
        else:
            value = values
        result[name[len(prefix):]] = value
    return result


# =============================================================================
# RESPONSE HEADERS
# =============================================================================

def set_expires_header(expires_seconds: int, headers: Optional[HeaderMap] = None) -> HeaderMap:
    """Let the client cache the response for `expires_seconds`."""
    headers = _response_headers(headers)
    headers[HEADER_EXPIRES] = http_date(time.time() + expires_seconds)
    headers[HEADER_CACHE_CONTROL] = f"private, max-age={expires_seconds}"
    return headers


def set_no_cache_header(headers: Optional[HeaderMap] = None) -> HeaderMap:
    """Forbid client side caching (HTTP/1.0 and HTTP/1.1 headers)."""
    headers = _response_headers(headers)
    headers[HEADER_EXPIRES] = http_date(0)
    headers[HEADER_PRAGMA] = "no-cache"
    headers[HEADER_CACHE_CONTROL] = "no-cache, no-store, max-age=0"
    return headers


def set_file_download_header(file_name: str, headers: Optional[HeaderMap] = None) -> HeaderMap:
    """
    Make the browser show a download dialog for `file_name`.

    Names outside Latin-1 (e.g. Chinese) additionally get an RFC 5987
    `filename*` parameter.
    """
    if not file_name:
        raise ValueError("File name must not be empty.")
    headers = _response_headers(headers)
    try:
        file_name.encode('iso-8859-1')
        disposition = f'attachment; filename="{file_name}"'
    except UnicodeEncodeError:
        fallback = file_name.encode('ascii', 'replace').decode('ascii')
        disposition = (
            f'attachment; filename="{fallback}"; '
            f"filename*=UTF-8''{quote(file_name)}"
        )
    headers[HEADER_CONTENT_DISPOSITION] = disposition
    return headers


def set_last_modified_header(last_modified: float, headers: Optional[HeaderMap] = None) -> HeaderMap:
    headers = _response_headers(headers)
    headers[HEADER_LAST_MODIFIED] = http_date(last_modified)
    return headers


def set_etag(etag: str, headers: Optional[HeaderMap] = None) -> HeaderMap:
    headers = _response_headers(headers)
    headers[HEADER_ETAG] = etag
    return headers


# =============================================================================
# CONDITIONAL REQUESTS
# =============================================================================

def check_if_modified_since(
    request_headers: Optional[Mapping[str, str]],
    last_modified: float
) -> Tuple[bool, Optional[int]]:
    """
    Evaluate If-Modified-Since against the content's modification time.

    Args:
        request_headers: Request headers
        last_modified: Epoch seconds of the last content change

    Returns:
        (proceed, status): (False, 304) when the client copy is current,
        otherwise (True, None)
    """
    header = _as_headers(request_headers).get(HEADER_IF_MODIFIED_SINCE)
    if not header:
        return True, None
    try:
        if_modified_since = parsedate_to_datetime(header).timestamp()
    except (TypeError, ValueError):
        logger.debug(f"Ignoring malformed {HEADER_IF_MODIFIED_SINCE}: {header}")
        return True, None

    # HTTP dates have second precision
    if last_modified < if_modified_since + 1:
        return False, HTTP_NOT_MODIFIED
    return True, None


def check_if_none_match_etag(
    request_headers: Optional[Mapping[str, str]],
    etag: str,
    response_headers: Optional[HeaderMap] = None
) -> Tuple[bool, Optional[int]]:
    """
    Evaluate If-None-Match against the content's ETag.

    A `*` header or any comma separated token equal to `etag` means the client
    copy is current: the ETag is echoed into `response_headers` and
    (False, 304) is returned. Otherwise (True, None).
    """
    header = _as_headers(request_headers).get(HEADER_IF_NONE_MATCH)
    if header is None:
        return True, None

    if header.strip() == '*':
        satisfied = True
    else:
        satisfied = any(token.strip() == etag for token in header.split(','))

    if satisfied:
        if response_headers is not None:
            response_headers[HEADER_ETAG] = etag
        return False, HTTP_NOT_MODIFIED
    return True, None
