import operator
from typing import Any, Callable
from .sift import Less

# Heaps are always smallest first. Any other order is expressed by the
# comparator passed as `less`.

def reverse_order(less: Less = operator.lt) -> Less:
    '''Comparator for largest-first ordering'''

    def greater(a: Any, b: Any) -> bool:
        return less(b, a)
    
    return greater

def by_key(key: Callable[[Any], Any], less: Less = operator.lt) -> Less:
    '''Compare items on key(item) only'''

    def key_less(a: Any, b: Any) -> bool:
        return less(key(a), key(b))
    
    return key_less

def by_item(sortkey: int, less: Less = operator.lt) -> Less:
    '''
    Compare tuples (or numpy rows) on a single field, e.g. (priority, payload)
    items sorted on field 0
    '''

    if sortkey < 0:
        raise ValueError('sortkey should be non-negative')
    
    return by_key(operator.itemgetter(sortkey), less)
