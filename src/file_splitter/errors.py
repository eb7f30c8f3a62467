"""Error type raised by split and merge operations."""


class TransferError(Exception):
    """A filesystem operation failed while splitting or merging.

    Carries a human-readable message naming the file and the operation,
    plus the underlying OSError as ``cause``.
    """

    def __init__(self, message: str, cause: OSError):
        super().__init__(message, cause)
        self.message = message
        self.cause = cause

    @property
    def errno(self) -> int | None:
        return self.cause.errno

    def __str__(self) -> str:
        return f"{self.message}: {self.cause}"
