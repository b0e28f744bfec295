from dheap import DWayHeap, get_topk, render_levels
from dheap.logger import logger, set_verbosity


set_verbosity(2)

values = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]

# Create a ternary heap (branching_factor=3)
logger.info("Creating heap...")
heap = DWayHeap.heapify(values, branching_factor=3)

# Test basic properties
logger.info(f"Heap size: {len(heap)}")
logger.info(f"Is empty: {heap.is_empty()}")
logger.info(f"First leaf index: {heap.first_leaf_index()}")
logger.info(f"Minimum: {heap.peek()}")
logger.info(f"Three smallest: {get_topk(heap, 3)}")

heap.update(20.1, 0.5)
heap.remove(7.8)
logger.info(f"After update and remove:\n{render_levels(heap)}")

drained = []
while not heap.is_empty():
    drained.append(heap.top())
logger.info(f"Drained: {drained}")
