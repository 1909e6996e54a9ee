"""
Content type lookup by file extension, e.g. get('jpg') -> 'image/jpeg'.
"""

import mimetypes
from typing import Optional

from config.constants import CONTENT_TYPE_OVERRIDES

DEFAULT_CONTENT_TYPE = 'application/octet-stream'


def get(extension: Optional[str], default: Optional[str] = None) -> Optional[str]:
    """
    Content type for a file extension.

    Args:
        extension: Extension with or without the leading dot, any case
        default: Returned for unknown extensions

    Returns:
        The content type, or default
    """
    if not extension or not extension.strip():
        return default
    key = extension.strip().lstrip('.').lower()
    if key in CONTENT_TYPE_OVERRIDES:
        return CONTENT_TYPE_OVERRIDES[key]
    guessed, _ = mimetypes.guess_type(f"file.{key}", strict=False)
    return guessed or default
