# Path: keyseg/matcher/engine/assignment.py
"""
Token Assignment

Second phase of segmentation: for one activation vector, hand contiguous
runs of tokens to the active slots from left to right.

Each active slot tries every run of one or more remaining tokens, leaving
at least one token for every active slot still to come. A run is accepted
when its joined text fully matches the slot's pattern and passes the
keyword's verify check. A branch completes only when the last active slot
consumes the final token; every other dead end is dropped silently.
"""

from typing import Iterator, Sequence

from ..models.keyword import Slot
from ..models.segmentation import Segmentation
from .tokens import join_tokens


def assign_tokens(
    tokens: Sequence[str],
    active_slots: Sequence[Slot],
    separator: str
) -> Iterator[Segmentation]:
    """
    Yield every complete assignment of tokens to the active slots.

    Assignments come out depth-first, shorter runs before longer ones at
    each slot.

    Args:
        tokens: Input split on the matcher's separator
        active_slots: Active slots in declaration order
        separator: Literal text used to join a run of tokens

    Yields:
        Segmentation per complete assignment

    Example:
        # STREET and CITY over ["Privet", "Drive", "Surrey"]
        # -> {STREET: "Privet", CITY: "Drive Surrey"}
        # -> {STREET: "Privet Drive", CITY: "Surrey"}
    """
    total = len(tokens)
    active = len(active_slots)

    if active == 0:
        if total == 0:
            yield Segmentation()
        return

    if total < active:
        return

    # (slot position, first unconsumed token, entries so far)
    stack: list[tuple[int, int, tuple]] = [(0, 0, ())]

    while stack:
        position, start, entries = stack.pop()

        if position == active:
            yield Segmentation(entries)
            continue

        slot = active_slots[position]
        slots_after = active - position - 1
        if slots_after == 0:
            ends = (total,)
        else:
            ends = range(start + 1, total - slots_after + 1)

        accepted = []
        for end in ends:
            segment = join_tokens(tokens, start, end, separator)
            if slot.accepts(segment):
                accepted.append((end, entries + ((slot.keyword, segment),)))

        for end, extended in reversed(accepted):
            stack.append((position + 1, end, extended))


__all__ = ['assign_tokens']
