"""In-place heap sort, quick sort and bubble sort over lists."""

from __future__ import annotations

from typing import Any, List, MutableSequence


def _heap_sink(items: MutableSequence[Any], element: int, limit: int) -> None:
    # Positions are 1-based: position k lives at items[k - 1].
    while element * 2 < limit:
        j = element * 2
        if j + 1 < limit and items[j - 1] < items[j]:
            j += 1
        if items[element - 1] < items[j - 1]:
            items[element - 1], items[j - 1] = items[j - 1], items[element - 1]
            element = j
        else:
            return


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place using heap sort."""
    size = len(items)
    for i in range((size - 1) // 2, -1, -1):
        _heap_sink(items, i + 1, size + 1)
    for i in range(size - 1, 0, -1):
        items[0], items[i] = items[i], items[0]
        _heap_sink(items, 1, i + 1)


def quick_sort(items: MutableSequence[Any], left: int, right: int) -> None:
    """Sort ``items[left:right]`` ascending in place, taking the first element as pivot."""
    if left < 0 or right > len(items):
        raise IndexError("sort range out of bounds")
    pending: List[tuple] = [(left, right)]
    while pending:
        lo, hi = pending.pop()
        if hi - lo < 2:
            continue
        pivot = items[lo]
        i, j = lo, hi
        while True:
            i += 1
            while i < hi and items[i] < pivot:
                i += 1
            j -= 1
            while items[j] > pivot:
                j -= 1
            if i >= j:
                break
            items[i], items[j] = items[j], items[i]
        items[lo], items[j] = items[j], items[lo]
        pending.append((lo, j))
        pending.append((j + 1, hi))


def bubble_sort(
    items: MutableSequence[Any], left: int, right: int, ascending: bool = True
) -> None:
    """Bubble sort ``items[left..right]`` (both ends inclusive) in place."""
    if left < 0 or right >= len(items):
        raise IndexError("sort range out of bounds")
    for i in range(left, right):
        for j in range(right, i, -1):
            out_of_order = (
                items[j - 1] > items[j] if ascending else items[j - 1] < items[j]
            )
            if out_of_order:
                items[j - 1], items[j] = items[j], items[j - 1]