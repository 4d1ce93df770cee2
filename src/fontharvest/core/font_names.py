"""Heuristic check for font-family-like strings."""

from fontharvest.core.constants import (
    FONT_NAME_STOP_WORDS,
    MAX_FONT_NAME_LENGTH,
    MIN_FONT_NAME_LENGTH,
)


def _has_ascii_letter(s: str) -> bool:
    return any(("a" <= c <= "z") or ("A" <= c <= "Z") for c in s)


def is_plausible_font_name(s: str) -> bool:
    """Check whether the string looks like a font-family name.

    A plausible name is 2-80 characters long, contains at least one ASCII
    letter, is not a known internal identifier, and carries none of the
    characters that mark namespaced symbols (``$``, ``/``) or structural
    markers (``(``, ``[``, a leading ``{``).

    Args:
        s: Candidate string, expected to be trimmed already.

    Returns:
        True if the string is accepted as a font-family name.

    Example:
        >>> is_plausible_font_name("IBM Plex Mono")
        True
        >>> is_plausible_font_name("cljs$core$IMap")
        False
    """
    if not isinstance(s, str):
        return False
    if len(s) < MIN_FONT_NAME_LENGTH or len(s) > MAX_FONT_NAME_LENGTH:
        return False
    if not _has_ascii_letter(s):
        return False
    if s.lower() in FONT_NAME_STOP_WORDS:
        return False
    if "$" in s or "/" in s:
        return False
    if "(" in s or "[" in s or s.startswith("{"):
        return False
    return True
