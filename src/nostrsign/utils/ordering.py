"""Copy-on-write insertion into timestamp-sorted event lists.

Both functions locate the insertion point with a binary search over
``created_at`` (O(log n) comparisons), then build a new list with the event
spliced in (O(n) copy). The input list is never mutated, so any code still
holding it sees the same contents afterwards.

Deduplication looks only at the element occupying the located index: if it
has the same ``id`` as the new event, the input list object itself is
returned. Events with equal ``created_at`` have no secondary ordering; the
search stops at the first exact timestamp match it meets.

No id or signature validation happens here.

Examples:
    ```python
    timeline: list[Event] = []
    for event in incoming:
        timeline = insert_event_into_descending_list(timeline, event)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from operator import gt, lt
from typing import TypeVar

from nostrsign.models.event import Event


E = TypeVar("E", bound=Event)


def _find_position(
    sorted_events: Sequence[E],
    created_at: int,
    precedes: Callable[[int, int], bool],
) -> int:
    """Return the index at which an event with *created_at* belongs.

    *precedes(a, b)* is True when timestamp *a* sorts strictly before *b*.
    """
    start = 0
    end = len(sorted_events) - 1

    if end < 0:
        return 0
    if precedes(sorted_events[end].created_at, created_at):
        return end + 1
    if not precedes(sorted_events[start].created_at, created_at):
        return start

    while True:
        if end <= start + 1:
            return end
        mid = start + (end - start) // 2
        mid_created_at = sorted_events[mid].created_at
        if precedes(mid_created_at, created_at):
            start = mid
        elif precedes(created_at, mid_created_at):
            end = mid
        else:
            return mid


def _insert(
    sorted_events: Sequence[E],
    event: E,
    precedes: Callable[[int, int], bool],
) -> Sequence[E] | list[E]:
    position = _find_position(sorted_events, event.created_at, precedes)

    if position < len(sorted_events) and sorted_events[position].id == event.id:
        return sorted_events

    return [*sorted_events[:position], event, *sorted_events[position:]]


def insert_event_into_descending_list(
    sorted_events: Sequence[E], event: E
) -> Sequence[E] | list[E]:
    """Insert *event* into a list sorted newest first.

    Args:
        sorted_events: Events sorted by descending ``created_at`` with no
            duplicate ids.
        event: The event to insert.

    Returns:
        A new list containing *event*, or *sorted_events* itself if the
        event already occupies the insertion index.
    """
    return _insert(sorted_events, event, gt)


def insert_event_into_ascending_list(
    sorted_events: Sequence[E], event: E
) -> Sequence[E] | list[E]:
    """Insert *event* into a list sorted oldest first.

    Args:
        sorted_events: Events sorted by ascending ``created_at`` with no
            duplicate ids.
        event: The event to insert.

    Returns:
        A new list containing *event*, or *sorted_events* itself if the
        event already occupies the insertion index.
    """
    return _insert(sorted_events, event, lt)
