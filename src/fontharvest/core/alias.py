"""Alias reference detection and mixed-value parsing.

An alias is a string of the form ``{some.token.path}`` that points to another
stored token value. A mixed value interleaves alias references with plain
text, e.g. ``calc({spacing.sm} + 4px)``.
"""

import dataclasses
import re
from typing import Literal

_ALIAS_TOKEN_RE = re.compile(r"(\{[^{}]+\})")


@dataclasses.dataclass(frozen=True)
class MixedSegment:
    """Segment of a mixed value: either an alias reference or plain text."""

    kind: Literal["alias", "text"]
    name: str = ""
    content: str = ""


def is_alias(value: str) -> bool:
    """Check whether the string is a bare alias reference like ``{font.body}``.

    Both ends are checked on their own, so a lone ``{`` is not an alias.
    """
    if not isinstance(value, str) or len(value) < 2:
        return False
    return value[0] == "{" and value[-1] == "}"


def parse_mixed_value(value: str) -> list[MixedSegment]:
    """Split a string into ordered alias and text segments.

    ``"calc({spacing.sm} + 4px)"`` yields a text segment ``"calc("``, an alias
    segment named ``"spacing.sm"`` and a text segment ``" + 4px)"``.
    """
    segments = []
    for part in _ALIAS_TOKEN_RE.split(value):
        if not part:
            continue
        if _ALIAS_TOKEN_RE.fullmatch(part):
            segments.append(MixedSegment(kind="alias", name=part[1:-1]))
        else:
            segments.append(MixedSegment(kind="text", content=part))
    return segments
