from __future__ import annotations

from typing import Sequence, Tuple

from .engine import MonthlySnapshot

DEFAULT_START_YEAR = 2025


def month_label(month: int, start_year: int = DEFAULT_START_YEAR) -> str:
    """Calendar label (YYYY-MM) for a zero-based month index. Display only."""
    year = start_year + month // 12
    return f"{year}-{month % 12 + 1:02d}"


def select_window(snapshots: Sequence[MonthlySnapshot], start: int, end: int) -> Tuple[MonthlySnapshot, ...]:
    """Snapshots with ``start <= month <= end``."""
    if start < 0 or end < start:
        raise ValueError(f"Invalid month range [{start}, {end}].")
    return tuple(snap for snap in snapshots if start <= snap.month <= end)
