from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar('V')

@dataclass
class AccessCountingEntry(Generic[V]):
    """
    Represents a single stored value together with the number of times
    it has been fetched.
    """
    value: V
    count: int = 0
    
    def increment_and_get(self) -> V:
        """Record one access and return the stored value."""
        self.count += 1
        return self.value
    
    def replace_value(self, new_value: V) -> V:
        """
        Swap in a new value, keeping the access count.
        
        Args:
            new_value: The value to store
            
        Returns:
            The previously stored value
        """
        previous = self.value
        self.value = new_value
        return previous
    
    @classmethod
    def create(cls, value: V) -> 'AccessCountingEntry[V]':
        """Create a fresh entry that has never been fetched."""
        return cls(value=value, count=0)
