from abc import ABC, abstractmethod
from datetime import datetime

class ClockInterface(ABC):
    @abstractmethod
    def now(self) -> datetime:
        '''
        Local wall-clock time. Used for display and alarm matching only.
        '''
        raise NotImplementedError

    @abstractmethod
    def monotonic(self) -> int:
        '''
        Integer nanoseconds from an arbitrary origin. Never goes backwards.  
        All elapsed-time arithmetic uses this, never `now()`.
        '''
        raise NotImplementedError
