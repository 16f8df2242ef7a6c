"""Secret redaction utilities for console and log output.

The OpenAI credential is shown in the run summary so users can tell which key
was used; it is always masked first.
"""

from __future__ import annotations

from typing import Optional

VISIBLE_SUFFIX_CHARS = 4


def mask_secret(value: Optional[str]) -> str:
    """Mask a credential, keeping its ``sk-`` prefix and last few characters.

    Short values are masked completely.

    Example:
        >>> mask_secret("sk-proj-abcdefghijklmnop1234")
        'sk-...1234'
    """
    if not value:
        return ""
    if len(value) <= VISIBLE_SUFFIX_CHARS * 2:
        return "*" * len(value)
    prefix = "sk-" if value.startswith("sk-") else ""
    return f"{prefix}...{value[-VISIBLE_SUFFIX_CHARS:]}"
