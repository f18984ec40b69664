"""Structural equality helpers used by the reconcilers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def sequences_equal(a: Sequence[str], b: Sequence[str]) -> bool:
    """Return whether two string sequences match element by element, in order."""

    if len(a) != len(b):
        return False
    return all(left == right for left, right in zip(a, b, strict=True))
