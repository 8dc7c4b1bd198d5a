import operator
from abc import ABC, abstractmethod
from typing import Any, Iterable, MutableSequence, Optional
import numpy as np
from numpy.typing import DTypeLike
from multiprocessing_logger import Logger
from .sift import Less, sift_up, sift_down, heapify
from .result import PushOutcome, PushResult, INSERTED
from .shared import shared_buffer

class BoundedMinHeap(ABC):
    '''
    Min-heap holding at most `capacity` items. Once full, a push either
    evicts the current minimum (item >= minimum) or is rejected, so the heap
    retains the largest items seen so far.
    Not thread-safe: callers must serialize access.
    '''

    def __init__(
            self,
            less: Less = operator.lt,
            name: str = '',
            logger: Optional[Logger] = None
        ) -> None:

        self.heap: MutableSequence = []
        self.numel = 0
        self.less = less
        self.name = name
        self.logger = logger
        self.local_logger = None
        if self.logger:
            self.local_logger = self.logger.get_logger(self.name)

    @property
    @abstractmethod
    def capacity(self) -> int:
        pass

    @abstractmethod
    def _append(self, item: Any) -> None:
        '''store item at position numel'''
        pass

    @abstractmethod
    def _vacate(self) -> Any:
        '''return the item at position numel, which just left the heap'''
        pass

    def push(self, item: Any) -> PushResult:
        """Push item onto heap, maintaining the heap invariant and the bound."""
        
        if self.numel < self.capacity:
            self._append(item)
            self.numel += 1
            sift_up(self.heap, self.numel, self.less)
            result = INSERTED
        elif self.numel > 0 and not self.less(item, self.heap[0]):
            item, self.heap[0] = self.heap[0], item
            sift_down(self.heap, 0, self.numel, self.less)
            result = PushResult(PushOutcome.EVICTED, item)
        else:
            result = PushResult(PushOutcome.REJECTED, item)

        if self.local_logger:
            self.local_logger.info(f'push, {result.outcome}, {self.numel}, {self.capacity}')

        return result

    def pop(self) -> Optional[Any]:
        """Pop the smallest item off the heap, None if the heap is empty."""

        if self.numel == 0:
            if self.local_logger:
                self.local_logger.info(f'pop, EMPTY, {self.numel}, {self.capacity}')
            return None

        self.numel -= 1
        last = self.numel
        self.heap[0], self.heap[last] = self.heap[last], self.heap[0]
        sift_down(self.heap, 0, self.numel, self.less)
        item = self._vacate()

        if self.local_logger:
            self.local_logger.info(f'pop, HIT, {self.numel}, {self.capacity}')

        return item

    def peek(self) -> Optional[Any]:
        if self.numel == 0:
            return None
        return self.heap[0]

    def __len__(self) -> int:
        return self.numel

    def is_empty(self) -> bool:
        return self.numel == 0

    def is_full(self) -> bool:
        return self.numel >= self.capacity

    def __str__(self):
        return str(list(self.heap[:self.numel]))

class OverlayHeap(BoundedMinHeap):
    '''
    Bounded min-heap working in place on a caller-owned buffer (list, 1D numpy
    array, RawArray...). Capacity is len(buffer) and no memory is allocated.
    Slots past numel are scratch space. The buffer must not be modified by 
    anything else while the heap is in use.
    '''

    def __init__(
            self,
            buffer: MutableSequence,
            numel: Optional[int] = None,
            less: Less = operator.lt,
            name: str = '',
            logger: Optional[Logger] = None
        ) -> None:

        super().__init__(less = less, name = name, logger = logger)

        if isinstance(buffer, np.ndarray) and buffer.ndim != 1:
            raise ValueError('buffer should be one dimensional')
        
        self.heap = buffer
        self.heapsize = len(buffer)

        # by default the whole buffer content is part of the heap
        if numel is None:
            numel = self.heapsize
        if not 0 <= numel <= self.heapsize:
            raise ValueError('numel should be between 0 and len(buffer)')
        
        self.numel = numel
        heapify(self.heap, self.numel, self.less)

    @classmethod
    def from_buffer(cls, buffer: MutableSequence, **kwargs) -> 'OverlayHeap':
        '''heapify the current content of the buffer'''
        return cls(buffer, numel = None, **kwargs)

    @classmethod
    def from_empty_buffer(cls, buffer: MutableSequence, **kwargs) -> 'OverlayHeap':
        '''ignore the current content of the buffer'''
        return cls(buffer, numel = 0, **kwargs)
    
    @classmethod
    def shared(
            cls, 
            capacity: int, 
            data_type: DTypeLike = np.float64, 
            **kwargs
        ) -> 'OverlayHeap':
        '''empty heap over a new buffer in shared memory'''
        return cls(shared_buffer(capacity, data_type), numel = 0, **kwargs)

    def push(self, item: Any) -> PushResult:
        # numpy would silently cast the item to the buffer dtype
        if isinstance(self.heap, np.ndarray) and not np.can_cast(
                np.min_scalar_type(item), self.heap.dtype, 'same_kind'
            ):
            raise ValueError(f'cannot store {item!r} in a {self.heap.dtype} buffer')
        return super().push(item)

    @property
    def capacity(self) -> int:
        return self.heapsize

    def _append(self, item: Any) -> None:
        self.heap[self.numel] = item

    def _vacate(self) -> Any:
        # the popped item stays in the buffer until the next push overwrites it
        return self.heap[self.numel]

class BoundedHeap(BoundedMinHeap):
    '''
    Bounded min-heap owning its storage. The list grows on push up to 
    capacity, which can be larger than the initial content.
    '''

    def __init__(
            self,
            capacity: int,
            less: Less = operator.lt,
            name: str = '',
            logger: Optional[Logger] = None
        ) -> None:

        super().__init__(less = less, name = name, logger = logger)

        if capacity < 0:
            raise ValueError('capacity should be non-negative')
        
        self.heapsize = capacity
        self.heap = []

    @classmethod
    def from_sequence(cls, seq: Iterable, **kwargs) -> 'BoundedHeap':
        '''heap holding a copy of seq, capacity is len(seq)'''
        items = list(seq)
        return cls.from_sequence_with_capacity(items, len(items), **kwargs)

    @classmethod
    def from_sequence_with_capacity(
            cls, 
            seq: Iterable, 
            capacity: int, 
            **kwargs
        ) -> 'BoundedHeap':
        '''heap holding a copy of seq, with room to grow up to capacity'''

        items = list(seq)
        if capacity < len(items):
            raise ValueError('capacity should be at least len(seq)')
        
        h = cls(capacity, **kwargs)
        h.heap = items
        h.numel = len(items)
        heapify(h.heap, h.numel, h.less)
        return h

    @property
    def capacity(self) -> int:
        return self.heapsize

    def _append(self, item: Any) -> None:
        self.heap.append(item)

    def _vacate(self) -> Any:
        # hand the item over to the caller
        return self.heap.pop()
