"""Counter Route Helpers — maps storage failures to the client-facing error envelope.

Invariants:
    - A DatabaseError raised by counter_store inside the block becomes
      CounterOperationError carrying only the route's generic message
    - The driver cause is logged once, by infrastructure/database.py, never returned
"""

from contextlib import contextmanager
from typing import Iterator

from app.core.domain_types import CounterResource
from app.core.errors import CounterOperationError, DatabaseError, ErrorContext


@contextmanager
def counter_operation(
    message: str, resource: CounterResource, key: str | None = None,
) -> Iterator[None]:
    """Run a counter read/write, translating storage errors for the client."""
    try:
        yield
    except DatabaseError as e:
        raise CounterOperationError(
            message, ErrorContext(counter=resource.value, key=key),
        ) from e
