import operator
from typing import Any, Callable, MutableSequence, Optional, Sequence

Less = Callable[[Any, Any], bool]

# All routines work on the prefix heap[0:length] without slicing, since
# slicing a list or a RawArray copies. Storage is 0-based: the children of
# pos are 2*pos+1 and 2*pos+2, the parent is (pos-1) >> 1.


def sift_up(
        heap: MutableSequence,
        length: Optional[int] = None,
        less: Less = operator.lt
    ) -> None:
    '''
    Restore the heap invariant when only the last element of the prefix
    may be out of place
    '''

    if length is None:
        length = len(heap)

    pos = length - 1
    # Follow the path to the root, swapping while the item is smaller
    # than its parent.
    while pos > 0:
        parentpos = (pos - 1) >> 1
        if not less(heap[pos], heap[parentpos]):
            break
        heap[pos], heap[parentpos] = heap[parentpos], heap[pos]
        pos = parentpos


def sift_down(
        heap: MutableSequence,
        pos: int = 0,
        length: Optional[int] = None,
        less: Less = operator.lt
    ) -> None:
    '''
    Restore the heap invariant when only heap[pos] may be larger than
    its children
    '''

    if length is None:
        length = len(heap)

    childpos = 2*pos + 1    # leftmost child position
    while childpos < length:
        # Set childpos to index of smaller child, left wins ties.
        rightpos = childpos + 1
        if rightpos < length and less(heap[rightpos], heap[childpos]):
            childpos = rightpos
        if not less(heap[childpos], heap[pos]):
            break
        heap[pos], heap[childpos] = heap[childpos], heap[pos]
        pos = childpos
        childpos = 2*pos + 1


def heapify(
        heap: MutableSequence,
        length: Optional[int] = None,
        less: Less = operator.lt
    ) -> None:
    '''Transform heap[0:length] into heap order, in-place, in O(length) time.'''

    if length is None:
        length = len(heap)

    for pos in reversed(range(length // 2)):
        sift_down(heap, pos, length, less)


def verify_heap(
        heap: Sequence,
        length: Optional[int] = None,
        less: Less = operator.lt
    ) -> bool:
    '''Return True if no child in heap[0:length] is smaller than its parent'''

    if length is None:
        length = len(heap)

    for childpos in range(1, length):
        if less(heap[childpos], heap[(childpos - 1) >> 1]):
            return False
    return True
