from dheap.dway_heap.dway_heap import DWayHeap
from dheap.dway_heap.display import render_levels
from dheap.dway_heap.exceptions import (
    HeapError,
    InvalidConfigurationError,
    NotFoundError,
    NullInputError,
)
from dheap.dway_heap.topk import get_topk

__version__ = "0.1.0"
