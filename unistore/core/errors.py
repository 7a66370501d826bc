"""
Exception types for the state container and content dispatcher.
"""


class UnistoreError(Exception):
    """Base class for all unistore errors."""
    pass


class ReentrantDispatchError(UnistoreError):
    """Raised when dispatch or subscribe is called while a reducer is running."""
    pass


class InvalidActionError(UnistoreError):
    """Raised when something other than a plain Action reaches the reducer."""
    pass


class InvalidReducerError(UnistoreError):
    """Raised when a reducer mapping cannot be combined."""
    pass


class MiddlewareError(UnistoreError):
    """Raised when dispatch is called while the middleware chain is being built."""
    pass


class ContractViolationError(UnistoreError):
    """
    Raised when a content payload does not satisfy the payload contract.

    Fields:
        clause: Short identifier of the failed clause (e.g. "editable.type")
        detail: Human-readable description of the failure
    """

    def __init__(self, clause: str, detail: str) -> None:
        super().__init__(f"{clause}: {detail}")
        self.clause = clause
        self.detail = detail


class ContentSourceError(UnistoreError):
    """Raised when a content source fails to deliver a well-formed response."""
    pass


class ConfigError(UnistoreError):
    """Raised when environment configuration cannot be parsed."""
    pass
