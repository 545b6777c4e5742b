"""Sequential roll number assignment.

A start roll such as ``2023CS1`` is split into its non-digit prefix and the
trailing digit run. Student ``i`` (zero based) gets ``prefix + str(base + i)``
left-padded with zeros to the width of ``str(i + 1)``; the padding is not the
width of the original suffix, so ``2023CS01`` continues as ``2023CS1``.
"""
from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from ..core.exceptions import ValidationError

_TRAILING_DIGITS = re.compile(r"(.*?)([0-9]+)")


def split_roll(start_roll: str) -> Tuple[str, int]:
    match = _TRAILING_DIGITS.fullmatch(start_roll or "")
    if not match:
        raise ValidationError(f"Start roll {start_roll!r} must end with a number")
    return match.group(1), int(match.group(2))


def assign_roll_numbers(start_roll: str, count: int) -> List[str]:
    prefix, base = split_roll(start_roll)
    return [prefix + str(base + i).zfill(len(str(i + 1))) for i in range(count)]


def assign_rolls(start_roll: str, names: Sequence[Optional[str]]) -> List[Tuple[str, Optional[str]]]:
    """Pair each name with its roll number, preserving order."""
    return list(zip(assign_roll_numbers(start_roll, len(names)), names))
