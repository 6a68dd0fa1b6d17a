"""Error sanitization utilities to prevent credential leakage."""

import re

# Patterns that might expose credentials in API error bodies
SENSITIVE_PATTERNS = [
    r"(bearer)\s+[A-Za-z0-9\-\._~\+/]+=*",
    r"(authorization)[:\s]+[^\s,;\)]+",
    r"(token)[\"']?[:=\s]+[\"']?[A-Za-z0-9\-\._~\+/]+=*",
    r"(password)[\"']?[:=\s]+[\"']?[^\s,;\)\"']+",
    r"(client-key-data|client-certificate-data)[\"']?[:=\s]+[\"']?[A-Za-z0-9/+=]+",
]


def sanitize_error_message(message: str) -> str:
    """Sanitize error message to remove credentials.

    Args:
        message: Original error message

    Returns:
        Sanitized error message with sensitive data redacted
    """
    sanitized = message
    for pattern in SENSITIVE_PATTERNS:
        sanitized = re.sub(pattern, r"\1 [REDACTED]", sanitized, flags=re.IGNORECASE)
    return sanitized

def sanitize_exception(error: Exception) -> str:
    """Sanitize exception message.

    Args:
        error: Exception object

    Returns:
        Sanitized error message
    """
    return sanitize_error_message(str(error))
