"""Semantic version policy with range constraints."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .policer import Policer, PolicyError

_IDENT = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_STRICT_RE = re.compile(
    r"v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    rf"(?:-({_IDENT}(?:\.{_IDENT})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)
_DOTTED = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_PLAIN_CV = rf"v?(?:\d+|[xX*])(?:\.(?:\d+|[xX*])){{0,2}}(?:-{_DOTTED})?(?:\+{_DOTTED})?"
_HYPHEN_RE = re.compile(rf"({_PLAIN_CV})\s+-\s+({_PLAIN_CV})")
_TOKEN_RE = re.compile(
    r"\s*(!=|>=|=>|<=|=<|~>|>|<|=|~|\^)?\s*"
    rf"v?(\d+|[xX*])(?:\.(\d+|[xX*]))?(?:\.(\d+|[xX*]))?(?:-({_DOTTED}))?(?:\+{_DOTTED})?"
)
_SEP_RE = re.compile(r"\s*,\s*|\s+")


def _prerelease_key(pre: str) -> tuple:
    if not pre:
        return (1,)
    return (0, tuple((0, int(p), "") if p.isdigit() else (1, 0, p) for p in pre.split(".")))


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A strictly formatted semantic version, optionally prefixed with ``v``."""

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    metadata: str = ""
    original: str = ""

    @classmethod
    def parse(cls, text: str) -> "Version":
        match = _STRICT_RE.fullmatch(text)
        if match is None:
            raise PolicyError(f"invalid semantic version: '{text}'")
        major, minor, patch, pre, meta = match.groups()
        return cls(int(major), int(minor), int(patch), pre or "", meta or "", text)

    @property
    def _key(self) -> tuple:
        return (self.major, self.minor, self.patch, _prerelease_key(self.prerelease))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: "Version") -> bool:
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)


def parse_version(tag: str) -> Version:
    """Parse a tag as a semantic version, allowing a leading ``v``."""
    return Version.parse(tag)


@dataclass(frozen=True)
class _Constraint:
    op: str
    parts: tuple[Optional[int], ...]
    prerelease: str

    def check(self, v: Version) -> bool:
        if v.prerelease and not self.prerelease:
            return False
        major, minor, patch = self.parts
        prefix = tuple(p for p in self.parts if p is not None)
        vprefix = (v.major, v.minor, v.patch)[: len(prefix)]
        floor = Version(*(p or 0 for p in self.parts), self.prerelease)
        exact = patch is not None
        op = self.op
        if op in ("", "="):
            return v == floor if exact else vprefix == prefix
        if op == "!=":
            return v != floor if exact else vprefix != prefix
        if op == ">":
            return v > floor if exact else vprefix > prefix
        if op == "<":
            return v < floor
        if op in (">=", "=>"):
            return v >= floor
        if op in ("<=", "=<"):
            return v <= floor if exact else vprefix <= prefix
        if v < floor:
            return False
        if op in ("~", "~>"):
            return vprefix[:2] == prefix[:2]
        # caret: lock the left-most non-zero component
        if major is None:
            return True
        if major > 0 or minor is None:
            return v.major == major
        if minor > 0 or patch is None:
            return (v.major, v.minor) == (major, minor)
        return (v.major, v.minor, v.patch) == (major, minor, patch)


class Constraints:
    """A set of version ranges: ``||`` separates alternatives, commas or spaces join."""

    def __init__(self, groups: list[list[_Constraint]], text: str = ""):
        self._groups = groups
        self.text = text

    @classmethod
    def parse(cls, text: str) -> "Constraints":
        return cls([cls._parse_group(g, text) for g in text.split("||")], text)

    @staticmethod
    def _parse_group(group: str, whole: str) -> list[_Constraint]:
        group = _HYPHEN_RE.sub(r">=\1 <=\2", group).strip()
        error = PolicyError(f"improper constraint: {whole}")
        if not group:
            raise error
        result: list[_Constraint] = []
        pos = 0
        while pos < len(group):
            if result:
                pos = _SEP_RE.match(group, pos).end()
            match = _TOKEN_RE.match(group, pos)
            if match is None:
                raise error
            pos = match.end()
            if pos < len(group) and not (group[pos].isspace() or group[pos] == ","):
                raise error
            op, *raw, pre = match.groups()
            parts: list[Optional[int]] = []
            for text in raw:
                wild = text is None or text in "xX*" or (parts and parts[-1] is None)
                parts.append(None if wild else int(text))
            result.append(_Constraint(op or "", tuple(parts), pre or ""))
        return result

    def check(self, version: Version) -> bool:
        """Return whether ``version`` satisfies the constraints."""
        return any(all(c.check(version) for c in group) for group in self._groups)


class SemVer(Policer):
    """Selects the highest semantic version within a range."""

    def __init__(self, range_: str):
        self.range = range_
        self._constraints = Constraints.parse(range_)

    def latest(self, versions: Sequence[str]) -> str:
        if not versions:
            raise PolicyError("version list argument cannot be empty")
        best: Optional[Version] = None
        for tag in versions:
            try:
                v = parse_version(tag)
            except PolicyError:
                continue
            if self._constraints.check(v) and (best is None or v > best):
                best = v
        if best is None:
            raise PolicyError("unable to determine latest version from provided list")
        return best.original