from multiprocessing import RawArray
import numpy as np
from numpy.typing import NDArray, DTypeLike

def shared_buffer(capacity: int, data_type: DTypeLike = np.float64) -> NDArray:
    '''
    Allocate capacity slots in shared memory and return them as a 1D numpy array.
    The array can be passed to a child process and used as an OverlayHeap buffer.
    There is no lock: only one process may use the heap at a time.
    '''

    if capacity < 0:
        raise ValueError('capacity should be non-negative')

    element_type = np.dtype(data_type)
    data = RawArray('B', capacity*element_type.itemsize)
    return np.frombuffer(data, dtype=element_type, count=capacity)
