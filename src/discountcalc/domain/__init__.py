"""Domain layer base classes: ValueObject, DomainEvent, event dispatcher."""
from discountcalc.domain.value_object import ValueObject
from discountcalc.domain.events import DomainEvent, InProcessEventDispatcher

__all__ = [
    "ValueObject",
    "DomainEvent",
    "InProcessEventDispatcher",
]
