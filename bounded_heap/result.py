from enum import Enum
from typing import Any, NamedTuple

class PushOutcome(Enum):
    INSERTED = 0
    EVICTED = 1
    REJECTED = 2

    # this is used in the operation log
    def __str__(self):
        return self.name

class PushResult(NamedTuple):
    '''
    Result of a bounded push:
    - INSERTED: the heap had room, item is None
    - EVICTED: the heap was full, item is the former minimum it dropped
    - REJECTED: the heap was full and the pushed item is smaller than 
    everything it holds, item is the pushed item which was not stored
    '''

    outcome: PushOutcome
    item: Any = None

    @property
    def inserted(self) -> bool:
        return self.outcome == PushOutcome.INSERTED

    @property
    def evicted(self) -> bool:
        return self.outcome == PushOutcome.EVICTED

    @property
    def rejected(self) -> bool:
        return self.outcome == PushOutcome.REJECTED

INSERTED = PushResult(PushOutcome.INSERTED)
