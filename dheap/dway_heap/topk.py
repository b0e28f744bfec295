from typing import Any

from dheap import DWayHeap


def get_topk(heap: DWayHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    The K elements with the lowest priority (the smallest values) are
    returned in ascending order. The heap itself is not modified.

    Parameters
    ----------
    heap : DWayHeap
        A DWayHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    # Best-first walk over the tree: only children of emitted nodes can
    # hold the next smallest value.
    d = heap.branching_factor
    elements = heap._elements
    n = len(elements)
    frontier = DWayHeap(branching_factor=d)
    frontier.add((elements[0], 0))

    result = []
    while len(result) < k and not frontier.is_empty():
        value, index = frontier.top()
        result.append(value)
        for child in range(d * index + 1, min(d * index + d + 1, n)):
            frontier.add((elements[child], child))
    return result
