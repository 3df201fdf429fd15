"""
Input Sanitization Utilities

Coercion and URL validation for values arriving from forms, shortcode
attributes and stored content.
"""

import math
import re
from typing import Any, Optional

# Allowed protocols for URLs
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']

_LEADING_INTEGER = re.compile(r'^\s*([+-]?\d+)')


def absint(value: Any) -> int:
    """
    Coerce a value to a non-negative integer.

    Strings are parsed by their leading integer ("7", "7abc" and "7.9" all
    give 7).  Anything non-numeric or negative becomes 0.

    Args:
        value: Raw value from a form field, attribute or option

    Returns:
        A non-negative integer
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(int(value), 0)

    match = _LEADING_INTEGER.match(str(value))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def sanitize_url(url: Optional[str]) -> Optional[str]:
    """
    Validate and sanitize URLs to prevent javascript: and data: URLs.

    Args:
        url: The URL to sanitize

    Returns:
        Sanitized URL or None if invalid
    """
    if not url:
        return None

    # Strip whitespace
    url = url.strip()

    # Check if URL starts with allowed protocol
    url_lower = url.lower()

    # Block dangerous protocols
    dangerous_protocols = ['javascript:', 'data:', 'vbscript:', 'file:']
    if any(url_lower.startswith(proto) for proto in dangerous_protocols):
        return None

    # Relative URLs stay relative; bare hosts get https://
    if url_lower.startswith('/'):
        return url
    if not any(url_lower.startswith(f'{proto}:') for proto in ALLOWED_PROTOCOLS):
        url = f'https://{url}'

    return url
