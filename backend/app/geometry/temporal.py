"""Reservation window arithmetic.

Reservation windows are half-open ``[start, end)``: a booking ending at 11:00
does not collide with one starting at 11:00. Permit validity uses a closed
interval instead, see ``window_contains``.
"""

from datetime import datetime

from app.geometry.types import TimeWindow


def windows_overlap(a: TimeWindow, b: TimeWindow) -> bool:
    """Whether two half-open windows share any instant.

    Degenerate windows (``start >= end``) never overlap anything.
    """
    if a.is_degenerate or b.is_degenerate:
        return False
    return a.start < b.end and b.start < a.end


def windows_overlap_three_case(a: TimeWindow, b: TimeWindow) -> bool:
    """Case-by-case form of ``windows_overlap``.

    Kept alongside the two-inequality form so the two can be checked against
    each other on boundary equalities.
    """
    if a.is_degenerate or b.is_degenerate:
        return False
    return (
        (a.start <= b.start < a.end)
        or (b.start <= a.start < b.end)
        or (a.start >= b.start and a.end <= b.end)
    )


def window_contains(valid_from: datetime, valid_to: datetime, instant: datetime) -> bool:
    """Closed-interval containment: both ends inclusive."""
    return valid_from <= instant <= valid_to
