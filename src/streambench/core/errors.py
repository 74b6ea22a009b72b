"""Exceptions raised by query operations."""


class EmptyDatasetError(ValueError):
    """Raised when an operation has no meaningful result for an empty dataset."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is undefined for an empty dataset")
        self.operation = operation
