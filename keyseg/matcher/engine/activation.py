# Path: keyseg/matcher/engine/activation.py
"""
Activation Enumerator

First phase of segmentation: decide, slot by slot in declaration order,
which keywords of a matcher take part in an assignment.

- FIXED slots are always active.
- OPTIONAL slots branch into inactive, then active.
- EXCLUSIVE slots branch into inactive (the remaining slots keep
  combining freely), then into an isolated vector in which the exclusive
  slot alone is active.

Vectors are produced depth-first from an explicit stack, so the number of
pending branches stays proportional to the slot count.
"""

from typing import Iterator, Sequence

from ..models.keyword import Occurrence

_BRANCH = 0
_SOLO = 1


def enumerate_activations(
    occurrences: Sequence[Occurrence],
    any_must_match: bool = True
) -> Iterator[tuple[bool, ...]]:
    """
    Yield every accepted activation vector in depth-first order.

    An exclusive slot's isolated vector is yielded every time a path
    reaches the slot, right after the inactive subtree of that path.
    Identical vectors reached on different paths are all yielded.

    Args:
        occurrences: Occurrence of each slot, in declaration order
        any_must_match: Reject the vector in which no slot is active

    Yields:
        One boolean per slot, True where the slot is active

    Example:
        list(enumerate_activations([Occurrence.OPTIONAL, Occurrence.FIXED]))
        # [(False, True), (True, True)]
    """
    count = len(occurrences)
    stack: list[tuple[int, int, tuple[bool, ...]]] = [(_BRANCH, 0, ())]

    while stack:
        kind, index, prefix = stack.pop()

        if kind == _SOLO:
            yield tuple(position == index for position in range(count))
            continue

        if index == count:
            if not any_must_match or any(prefix):
                yield prefix
            continue

        occurrence = occurrences[index]
        # Pushed in reverse so the inactive branch is explored first
        if occurrence == Occurrence.EXCLUSIVE:
            stack.append((_SOLO, index, ()))
            stack.append((_BRANCH, index + 1, prefix + (False,)))
        elif occurrence == Occurrence.OPTIONAL:
            stack.append((_BRANCH, index + 1, prefix + (True,)))
            stack.append((_BRANCH, index + 1, prefix + (False,)))
        else:
            stack.append((_BRANCH, index + 1, prefix + (True,)))


__all__ = ['enumerate_activations']
