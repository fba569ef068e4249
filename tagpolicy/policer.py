"""Common interface and helpers shared by the tag ordering policies."""

from __future__ import annotations

import abc
import enum
from typing import Sequence


class PolicyError(ValueError):
    """Raised when a policy is misconfigured or cannot select a tag."""


class Order(str, enum.Enum):
    """Sort direction used by the ordering policies."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str) -> "Order":
        """Return the order named by ``value``; an empty string means ascending."""
        if value == "":
            return cls.ASC
        try:
            return cls(value)
        except ValueError:
            raise PolicyError(
                f"invalid order argument provided: '{value}', "
                f"must be one of: {cls.ASC.value}, {cls.DESC.value}"
            ) from None


class Policer(abc.ABC):
    """A policy that picks the latest tag from a list of tags."""

    @abc.abstractmethod
    def latest(self, versions: Sequence[str]) -> str:
        """Return the latest of ``versions`` or raise :class:`PolicyError`."""