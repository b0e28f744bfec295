from dheap.dway_heap.dway_heap import DWayHeap
