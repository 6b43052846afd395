"""Query: CQRS read marker. Every calculator request is a read."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """Query: intent to read. One handler per query type."""
    pass
