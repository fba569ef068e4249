"""Construction of a policy from a declarative policy choice."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .alphabetical import Alphabetical
from .numerical import Numerical
from .policer import Policer, PolicyError
from .semver import SemVer


@dataclass(frozen=True)
class SemVerPolicy:
    """Choose the highest semantic version within ``range``."""

    range: str


@dataclass(frozen=True)
class AlphabeticalPolicy:
    """Choose a tag by lexical order; ``order`` is ``asc``, ``desc`` or empty."""

    order: str = ""


@dataclass(frozen=True)
class NumericalPolicy:
    """Choose a tag by numeric value; ``order`` is ``asc``, ``desc`` or empty."""

    order: str = ""


@dataclass(frozen=True)
class ImagePolicyChoice:
    """Exactly one of the policy kinds; the first one set wins."""

    semver: Optional[SemVerPolicy] = None
    alphabetical: Optional[AlphabeticalPolicy] = None
    numerical: Optional[NumericalPolicy] = None


def policer_from_spec(choice: ImagePolicyChoice) -> Policer:
    """Build the policy described by ``choice``.

    Raises :class:`PolicyError` if no policy is chosen or the chosen one is invalid.
    """
    if choice.semver is not None:
        return SemVer(choice.semver.range)
    if choice.alphabetical is not None:
        return Alphabetical(choice.alphabetical.order.upper())
    if choice.numerical is not None:
        return Numerical(choice.numerical.order.upper())
    raise PolicyError("given ImagePolicyChoice object is invalid")