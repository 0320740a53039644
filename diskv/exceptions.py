"""
Custom exceptions for diskv.
"""


class DiskvError(Exception):
    """
    Raised when the backing store fails an I/O operation.

    This is the single error kind for directory creation, write, read and
    remove failures. A missing key is never reported through it.
    """

    def __init__(self, cause: OSError):
        """
        Initialize the error.

        Args:
            cause: The underlying OSError.
        """
        self.cause = cause
        super().__init__(str(cause))

    def __str__(self) -> str:
        return str(self.cause)


class CacheInvariantError(RuntimeError):
    """
    Raised when the cache's size accounting is inconsistent.

    Not a DiskvError: code handling I/O failures must never swallow it.
    """

    def __init__(self, needed: int, current_size: int, max_size: int):
        self.needed = needed
        self.current_size = current_size
        self.max_size = max_size
        super().__init__(
            f"cache cannot fit {needed} bytes after eviction: "
            f"current_size={current_size}, max_size={max_size}"
        )
