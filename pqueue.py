import heapq
import itertools
from typing import Callable, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class StablePriorityQueue(Generic[T]): # min-priority queue, ties resolved by insertion order
    def __init__(self, priority_fn: Callable[[T], int]):
        self.priority_fn = priority_fn # extracts the priority (weight) of an element
        self._heap: List[Tuple[int, int, T]] = []
        self._seq = itertools.count() # insertion counter, breaks ties between equal priorities

    @classmethod
    def empty(cls, priority_fn: Callable[[T], int]) -> "StablePriorityQueue[T]":
        return cls(priority_fn)

    def insert(self, element: T) -> "StablePriorityQueue[T]":
        heapq.heappush(self._heap, (self.priority_fn(element), next(self._seq), element))
        return self

    def take(self, n: int) -> List[T]:
        """
        Return the n lowest-priority elements (fewer if the queue is shorter)
        in ascending priority, earliest insertion first on ties.
        The queue itself is left unchanged
        """
        # pop and push back: O(n log size), entries keep their sequence numbers
        top = [heapq.heappop(self._heap) for _ in range(min(max(n, 0), len(self._heap)))]
        for entry in top:
            heapq.heappush(self._heap, entry)
        return [entry[2] for entry in top]

    def drop(self, n: int) -> "StablePriorityQueue[T]":
        # removes exactly the elements take(n) would return
        for _ in range(min(max(n, 0), len(self._heap))):
            heapq.heappop(self._heap)
        return self

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
