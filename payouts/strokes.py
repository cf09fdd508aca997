"""Fixed stroke allocation for the four skill groups."""

from __future__ import annotations

from typing import Optional

from models.hole import CourseHole

# Share of the course's holes each group receives as strokes, in thirds.
# On 18 holes this is the familiar 0 / 6 / 12 / 18.
GROUP_ALLOWANCE_THIRDS = {
    "A": 0,
    "B": 1,
    "C": 2,
    "D": 3,
}


def group_allowance(group: str, hole_count: int = 18) -> int:
    """Total strokes a group receives over the whole course."""
    thirds = GROUP_ALLOWANCE_THIRDS.get(group, 0)
    return (hole_count * thirds) // 3


def strokes_on_hole(group: str, hole_handicap: Optional[int], hole_count: int = 18) -> int:
    """
    Strokes a player in ``group`` receives on a hole ranked ``hole_handicap``.

    Every hole gets ``allowance // hole_count`` strokes; the leftover strokes go
    one each to the hardest holes (lowest handicap rating) first.
    """
    if not hole_handicap or hole_count <= 0:
        return 0

    total = group_allowance(group, hole_count)
    base, remainder = divmod(total, hole_count)
    return base + (1 if hole_handicap <= remainder else 0)


def net_score(gross: int, strokes: int) -> int:
    """Gross minus allocated strokes. Never clamped."""
    return gross - strokes


def net_score_for_hole(gross: int, group: str, hole: Optional[CourseHole], hole_count: int = 18) -> int:
    """Net score on a course hole; a missing hole reference gives no strokes."""
    if hole is None:
        return gross
    return net_score(gross, strokes_on_hole(group, hole.handicap, hole_count))
