"""Centralized constants for internal implementation details.

Constants here are NOT environment-specific configuration. For settings
that vary per deployment, use ``src/core/config.py`` instead.

Example:
    >>> from src.core.constants import JSON_CONTENT_TYPE
    >>> headers = {"Content-Type": JSON_CONTENT_TYPE}
"""

# =============================================================================
# Timeouts
# =============================================================================

API_TIMEOUT_DEFAULT: float = 30.0
"""Default transport timeout for conference API calls in seconds."""


# =============================================================================
# Wire format
# =============================================================================

JSON_CONTENT_TYPE: str = "application/json"
"""Media type of every request and response body."""

HEALTHY_STATUS_TEXT: str = "Healthy"
"""Body returned by the health endpoint when the service is up."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body in error details (truncation limit)."""


# =============================================================================
# Abstract markup
# =============================================================================

PARAGRAPH_DELIMITER: str = "\r\n"
"""Line break that separates paragraphs in a raw abstract."""

PARAGRAPH_OPEN: str = "<p>"
PARAGRAPH_CLOSE: str = "</p>"
