"""Input validation guarding against path traversal and command injection."""

from __future__ import annotations

import unicodedata
from pathlib import PurePath

from .errors import ValidationError

_URL_DANGEROUS_CHARS = ("$", "`", "|", ";", "&", "<", ">", "(", ")", "{", "}", "\n", "\r")
_BRANCH_DANGEROUS_CHARS = _URL_DANGEROUS_CHARS + (" ",)
_URL_SCHEMES = ("https://", "http://", "git://", "ssh://", "git@")
# Control characters that are nevertheless whitespace and are kept for display.
_CONTROL_WHITESPACE = frozenset("\t\n\x0b\x0c\r\x85")
_DISPLAY_LIMIT = 100


def validate_path(path: str) -> PurePath:
    """Return ``path`` as a path object, rejecting null bytes and traversal."""
    if "\0" in path:
        raise ValidationError("Path contains null bytes")
    if ".." in path or "~" in path:
        raise ValidationError("Path contains directory traversal patterns")
    return PurePath(path)


def _reject_dangerous(value: str, dangerous: tuple[str, ...], what: str) -> None:
    for ch in dangerous:
        if ch in value:
            raise ValidationError(f"{what} contains dangerous character: {ch}")


def validate_remote_url(url: str) -> None:
    """Raise ``ValidationError`` unless ``url`` is a safe Git remote URL."""
    if "\0" in url:
        raise ValidationError("URL contains null bytes")
    _reject_dangerous(url, _URL_DANGEROUS_CHARS, "URL")
    if not url.startswith(_URL_SCHEMES):
        raise ValidationError("URL must use a valid Git protocol")


def validate_branch_name(name: str) -> None:
    """Raise ``ValidationError`` unless ``name`` is a safe branch name."""
    if "\0" in name:
        raise ValidationError("Branch name contains null bytes")
    _reject_dangerous(name, _BRANCH_DANGEROUS_CHARS, "Branch name")
    if name.startswith("-"):
        raise ValidationError("Branch name cannot start with hyphen")
    if name.endswith(".lock"):
        raise ValidationError("Branch name cannot end with .lock")
    if ".." in name or "//" in name:
        raise ValidationError("Branch name contains invalid patterns")


def _displayable(ch: str) -> bool:
    return unicodedata.category(ch) != "Cc" or ch in _CONTROL_WHITESPACE


def sanitize_for_display(text: str) -> str:
    """Drop non-whitespace control characters and cap the length at 100."""
    return "".join(ch for ch in text if _displayable(ch))[:_DISPLAY_LIMIT]