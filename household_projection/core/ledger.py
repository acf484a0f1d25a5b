from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .inputs import CashFlowEntry

logger = logging.getLogger(__name__)


def coerce_amount(raw: object) -> float:
    """Parse a user-supplied monthly amount; anything unusable becomes 0.0."""
    if isinstance(raw, bool):
        logger.warning("Ignoring boolean cash flow amount %r", raw)
        return 0.0
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        logger.warning("Could not parse cash flow amount %r, using 0", raw)
        return 0.0
    if not np.isfinite(amount):
        logger.warning("Non-finite cash flow amount %r, using 0", raw)
        return 0.0
    return amount


def _clean_description(description: str) -> str:
    cleaned = (description or "").strip()
    if not cleaned:
        raise ValueError("Description cannot be blank.")
    return cleaned


class CashFlowLedger:
    """Editable list of recurring monthly entries addressed by id, never by position."""

    def __init__(self, entries: Iterable[CashFlowEntry] = ()):
        self._entries: List[CashFlowEntry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CashFlowEntry]:
        return iter(self._entries)

    def _position(self, entry_id: str) -> int:
        for idx, entry in enumerate(self._entries):
            if entry.entry_id == entry_id:
                return idx
        raise KeyError(entry_id)

    def get(self, entry_id: str) -> CashFlowEntry:
        return self._entries[self._position(entry_id)]

    def add(self, description: str, amount: object) -> CashFlowEntry:
        entry = CashFlowEntry(description=_clean_description(description), amount_monthly=coerce_amount(amount))
        self._entries.append(entry)
        return entry

    def update(self, entry_id: str, description: Optional[str] = None, amount: object = None) -> CashFlowEntry:
        idx = self._position(entry_id)
        entry = self._entries[idx]
        if description is not None:
            entry = replace(entry, description=_clean_description(description))
        if amount is not None:
            entry = replace(entry, amount_monthly=coerce_amount(amount))
        self._entries[idx] = entry
        return entry

    def remove(self, entry_id: str) -> None:
        del self._entries[self._position(entry_id)]

    def entries(self) -> Tuple[CashFlowEntry, ...]:
        """Snapshot suitable for ``ProjectionConfig.extra_entries``."""
        return tuple(self._entries)
