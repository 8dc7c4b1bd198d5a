import operator
from typing import Any, Iterable, List
from .heap import BoundedHeap
from .ordering import reverse_order
from .sift import Less

def _drain(heap: BoundedHeap) -> List[Any]:
    items = []
    while not heap.is_empty():
        items.append(heap.pop())
    return items

def nlargest(n: int, iterable: Iterable, less: Less = operator.lt) -> List[Any]:
    '''Return the n largest items, largest first, in O(len(iterable) log n)'''

    heap = BoundedHeap(max(n, 0), less = less)
    for item in iterable:
        heap.push(item)
    return _drain(heap)[::-1]

def nsmallest(n: int, iterable: Iterable, less: Less = operator.lt) -> List[Any]:
    '''Return the n smallest items, smallest first'''

    heap = BoundedHeap(max(n, 0), less = reverse_order(less))
    for item in iterable:
        heap.push(item)
    return _drain(heap)[::-1]
