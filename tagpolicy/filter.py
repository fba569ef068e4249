"""Regular expression filtering of tags with optional value extraction."""

from __future__ import annotations

import re
from typing import Iterable

from .policer import PolicyError

_TEMPLATE_RE = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\w+))")


def _expand(template: str, match: re.Match) -> str:
    def replace(ref: re.Match) -> str:
        if ref.group(1):
            return "$"
        name = ref.group(2) or ref.group(3)
        try:
            key: int | str = int(name) if name.isdigit() else name
            return match.group(key) or ""
        except (IndexError, error_types):
            return ""

    return _TEMPLATE_RE.sub(replace, template)


error_types = (re.error,)


class RegexFilter:
    """Keeps tags that match a pattern, optionally rewriting them with a template."""

    def __init__(self, pattern: str, replace: str = ""):
        try:
            self.regexp = re.compile(pattern)
        except re.error as exc:
            raise PolicyError(f"invalid regular expression pattern '{pattern}': {exc}") from exc
        self.replace = replace
        self._filtered: dict[str, str] = {}

    def apply(self, tags: Iterable[str]) -> None:
        """Filter ``tags``, replacing any earlier result."""
        self._filtered = {}
        for item in tags:
            match = self.regexp.search(item)
            if match is None:
                continue
            tag = _expand(self.replace, match) if self.replace else item
            self._filtered[tag] = item

    def items(self) -> list[str]:
        """Return the filtered (and possibly rewritten) tags."""
        return list(self._filtered)

    def original_tag(self, tag: str) -> str:
        """Return the tag that produced ``tag``, or an empty string."""
        return self._filtered.get(tag, "")