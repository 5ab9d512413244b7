"""
CPA cache with anti-flicker hysteresis

A freshly computed CPA only replaces the cached one when it moved by a
meaningful amount, so small position noise does not make the displayed
value jitter between cycles.
"""
import logging
import math
from typing import Dict, Iterable, List, Optional

from .cpa_tcpa import CPAResult

logger = logging.getLogger(__name__)

HYSTERESIS_MIN_ABS = 50.0   # meters
HYSTERESIS_MIN_REL = 0.10   # fraction of the cached CPA


def is_significant_change(
    previous: float,
    current: float,
    min_abs: float = HYSTERESIS_MIN_ABS,
    min_rel: float = HYSTERESIS_MIN_REL
) -> bool:
    """
    Whether a CPA change is large enough to be shown

    Both conditions must hold: |current - previous| >= min_abs and
    |current - previous| / previous >= min_rel.
    """
    delta = abs(current - previous)
    if delta < min_abs:
        return False
    relative = delta / previous if previous > 0 else math.inf
    return relative >= min_rel


class CPACache:
    """
    Last accepted CPA/TCPA per contact identifier

    Owned by exactly one tracker and passed by reference into each tracking
    cycle. Entries are created on the first determined CPA, replaced only on
    a significant change and removed by `sweep` once the contact disappears.
    """

    def __init__(
        self,
        min_abs: float = HYSTERESIS_MIN_ABS,
        min_rel: float = HYSTERESIS_MIN_REL
    ):
        self.min_abs = min_abs
        self.min_rel = min_rel
        self._entries: Dict[str, CPAResult] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier) -> bool:
        return identifier in self._entries

    def get(self, identifier: str) -> Optional[CPAResult]:
        return self._entries.get(identifier)

    def identifiers(self) -> List[str]:
        return list(self._entries)

    def resolve(
        self,
        identifier: str,
        computed: Optional[CPAResult]
    ) -> Optional[CPAResult]:
        """
        Apply the hysteresis rule and return the pair to display

        Args:
            identifier: Contact identifier
            computed: Freshly computed pair, None if undetermined

        Returns:
            The accepted pair (new or retained), or None when nothing was
            ever determined for this contact.
        """
        cached = self._entries.get(identifier)

        if computed is None:
            # Stale-but-present beats disappearing
            return cached

        if cached is None or is_significant_change(
            cached.cpa, computed.cpa, self.min_abs, self.min_rel
        ):
            self._entries[identifier] = computed
            return computed

        return cached

    def sweep(self, seen: Iterable[str]) -> int:
        """
        Drop every entry whose identifier was not seen in the current cycle

        Returns:
            Number of removed entries
        """
        keep = set(seen)
        stale = [key for key in self._entries if key not in keep]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(f"Swept {len(stale)} CPA cache entries: {stale}")
        return len(stale)

    def clear(self) -> None:
        if self._entries:
            logger.info(f"Clearing CPA cache ({len(self._entries)} entries)")
        self._entries.clear()
