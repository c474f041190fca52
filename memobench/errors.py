class MemobenchError(Exception):
    """Base class for errors raised by memobench"""


class InvalidArgument(MemobenchError, ValueError):
    """Raised when a Fibonacci index is negative or not an integer"""


class ResolutionFailure(MemobenchError):
    """A hostname could not be resolved"""

    def __init__(self, hostname: str, cause: BaseException):
        self.hostname = hostname
        self.cause = cause
        super().__init__(f"Could not resolve {hostname!r}: {cause}")
