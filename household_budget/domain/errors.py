"""Error taxonomy shared by the domain, use cases, and adapters."""


class BudgetError(Exception):
    """Base class for every failure reported by the budget core."""


class FormatError(BudgetError, ValueError):
    """Malformed month key or numeric input, caught before any store call."""


class StoreError(BudgetError):
    """The data store rejected or failed a request."""


class StoreUnavailable(StoreError, RuntimeError):
    """The data store cannot be reached or is not configured."""


class PartialWriteFailure(StoreError):
    """A multi-step write failed after some steps were already applied.

    Attributes:
        operation: Name of the multi-step operation.
        completed: Number of writes applied before the failure.
        cause: Underlying store error, when known.
    """

    def __init__(
        self,
        operation: str,
        completed: int,
        cause: BaseException | None = None,
    ) -> None:
        self.operation = operation
        self.completed = completed
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"{operation} failed after {completed} completed writes{detail}"
        )


class NotFound(StoreError, LookupError):
    """A referenced row does not exist at update or delete time.

    Attributes:
        kind: Table or entity kind that was looked up.
        entity_id: Identifier that was not found.
    """

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"No {kind} row with id {entity_id}")


__all__ = [
    "BudgetError",
    "FormatError",
    "StoreError",
    "StoreUnavailable",
    "PartialWriteFailure",
    "NotFound",
]
