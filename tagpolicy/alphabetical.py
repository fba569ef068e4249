"""Alphabetical ordering policy."""

from __future__ import annotations

from typing import Sequence

from .policer import Order, Policer, PolicyError


class Alphabetical(Policer):
    """Selects the last tag in lexical order, or the first for descending order."""

    def __init__(self, order: str = ""):
        self.order = Order.parse(order)

    def latest(self, versions: Sequence[str]) -> str:
        if not versions:
            raise PolicyError("version list argument cannot be empty")
        return min(versions) if self.order is Order.DESC else max(versions)