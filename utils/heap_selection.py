import heapq
from typing import List, Optional, Sequence


def find_nth_minimum(numbers: Optional[Sequence[int]], n: int) -> int:
    """
    Find the n-th smallest value in a collection without sorting all of it.

    A max-heap of size n holds the n smallest values seen so far. Every later
    value smaller than the heap's maximum replaces that maximum, so when the
    scan ends the root of the heap is the n-th minimum.
    Runs in O(M log N) time and O(N) space, M being the collection size.

    Example:
        >>> find_nth_minimum([5, 3, 8, 1, 9, 2], 3)
        3

    Args:
        numbers: Integers to search. Must not be None or empty.
        n: 1-based rank of the minimum to find

    Returns:
        int: The n-th smallest value (duplicates count separately)

    Raises:
        ValueError: If numbers is None or empty, or n is not in [1, len(numbers)]
    """
    if not numbers:
        raise ValueError("Numbers collection cannot be null or empty")
    if n <= 0 or n > len(numbers):
        raise ValueError(f"N must be between 1 and {len(numbers)}")

    # heapq is a min-heap; negated values turn it into a max-heap
    heap: List[int] = [-value for value in numbers[:n]]
    heapq.heapify(heap)

    for value in numbers[n:]:
        if value < -heap[0]:
            heapq.heapreplace(heap, -value)

    return -heap[0]
