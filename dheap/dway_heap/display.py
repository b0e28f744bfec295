from dheap.dway_heap.dway_heap import DWayHeap


def render_levels(heap: DWayHeap, node_width: int = 4) -> str:
    """
    Render the heap tree one level per line, root first.

    Nodes of each level are right-aligned in evenly spaced columns, so the
    output roughly follows the tree's shape for small heaps.

    Parameters
    ----------
    heap : DWayHeap
        The heap to render.
    node_width : int
        Column width budgeted per node of the deepest full level, by
        default 4.

    Returns
    -------
    str
        The rendered tree, or an empty string for an empty heap.
    """
    elements = heap.to_list()
    if not elements:
        return ""

    d = heap.branching_factor
    levels = []
    start, level_size = 0, 1
    while start < len(elements):
        levels.append(elements[start:start + level_size])
        start += level_size
        level_size *= d

    total_width = d ** (len(levels) - 1) * node_width
    lines = []
    for level in levels:
        spacing = max(total_width // (len(level) + 1), 1)
        lines.append("".join(f"{value!s:>{spacing}}" for value in level))
    return "\n".join(lines)
