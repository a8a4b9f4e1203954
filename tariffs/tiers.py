"""
Weight tiers ("Staffels")
=========================

Tier columns are found by header name ("1 ton", "2 t", "24 tonnes", ...)
and sorted by tonnage. A requested weight is first clamped into the range
covered by the tiers and then mapped onto a tier:

- ceil    : smallest tier >= weight (default)
- floor   : largest tier <= weight
- nearest : closest tier, the lower one wins a tie
- interp  : the two bounding tiers, rate interpolated linearly
"""

from __future__ import annotations
import re
from typing import Iterable, List, Sequence

from .errors import NoTierColumns
from .models import DEFAULT_TIER_METHOD, TIER_METHODS, Tier, TierSelection

TIER_HEADER = re.compile(r"(?:^|\s)(\d{1,3})\s*(?:t|ton|tonne)s?(?:$|\b)", re.IGNORECASE)


# ============================================================================
# TIER DISCOVERY
# ============================================================================

def parse_tiers(columns: Iterable[object]) -> List[Tier]:
    """
    Find tier columns in a header row.

    Args:
        columns: Header names (non-strings are converted)

    Returns:
        Tiers sorted ascending by tonnage; columns sharing a tonnage keep
        their header order
    """
    found: List[Tier] = []
    for column in columns:
        name = str(column)
        match = TIER_HEADER.search(name)
        if match:
            found.append(Tier(tons=int(match.group(1)), column=name))
    return sorted(found, key=lambda t: t.tons)


# ============================================================================
# TIER SELECTION
# ============================================================================

def clamp_tons(tiers: Sequence[Tier], tons: float) -> float:
    """Clamp a weight into [smallest tier, largest tier]."""
    return min(max(tons, tiers[0].tons), tiers[-1].tons)


def select_tier(
    tiers: Sequence[Tier],
    tons: float,
    method: str = DEFAULT_TIER_METHOD,
) -> TierSelection:
    """
    Map a weight onto the tier(s) that price it.

    Args:
        tiers: Tiers sorted ascending by tonnage
        tons: Requested weight in tons
        method: One of TIER_METHODS

    Returns:
        TierSelection with the clamped weight

    Raises:
        NoTierColumns: If there are no tiers
        ValueError: If the method is unknown
    """
    if not tiers:
        raise NoTierColumns()
    if method not in TIER_METHODS:
        raise ValueError(f"Unknown tier method: {method!r}")

    t = clamp_tons(tiers, tons)

    if method == "floor":
        tier = _floor(tiers, t)
        return TierSelection(lower=tier, upper=tier, tons=t, method=method)

    if method == "nearest":
        tier = min(tiers, key=lambda n: abs(n.tons - t))
        return TierSelection(lower=tier, upper=tier, tons=t, method=method)

    if method == "interp":
        lower = _floor(tiers, t)
        upper = _ceil(tiers, t)
        if lower.tons == upper.tons:
            upper = lower
        return TierSelection(lower=lower, upper=upper, tons=t, method=method)

    tier = _ceil(tiers, t)
    return TierSelection(lower=tier, upper=tier, tons=t, method=method)


def _ceil(tiers: Sequence[Tier], tons: float) -> Tier:
    return next((n for n in tiers if tons <= n.tons), tiers[-1])


def _floor(tiers: Sequence[Tier], tons: float) -> Tier:
    return next((n for n in reversed(tiers) if n.tons <= tons), tiers[0])
