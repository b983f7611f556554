"""Exceptions raised by the event dispatcher."""


class DispatcherError(RuntimeError):
    """Base class for dispatcher exceptions."""


class InvalidRegistration(DispatcherError, TypeError):
    """Raised when a listener or priority has the wrong type."""

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value
