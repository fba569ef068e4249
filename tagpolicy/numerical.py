"""Numerical ordering policy."""

from __future__ import annotations

from typing import Optional, Sequence

from .policer import Order, Policer, PolicyError


def _parse_number(text: str) -> float:
    if "_" in text or text != text.strip():
        raise ValueError(text)
    return float(text)


class Numerical(Policer):
    """Selects the tag with the highest numeric value, or lowest for descending order."""

    def __init__(self, order: str = ""):
        self.order = Order.parse(order)

    def latest(self, versions: Sequence[str]) -> str:
        if not versions:
            raise PolicyError("version list argument cannot be empty")
        latest = ""
        best: Optional[float] = None
        for version in versions:
            try:
                value = _parse_number(version)
            except ValueError:
                raise PolicyError(f"failed to parse invalid numeric value '{version}'") from None
            if best is not None:
                if self.order is Order.ASC and value < best:
                    continue
                if self.order is Order.DESC and value > best:
                    continue
            latest, best = version, value
        return latest