"""Touchee exceptions."""


class ToucheeError(Exception):
    """Base class for all touchee errors."""


class ProcessingError(ToucheeError):
    """Raised by action handlers when an action cannot be processed."""


class ValidationError(ProcessingError):
    """Raised when form values fail validation on commit."""

    def __init__(self, message: str, identifiers=()):
        super().__init__(message)
        self.identifiers = tuple(identifiers)


class UnresolvedActionError(ToucheeError):
    """Describes an action that has no handler registered in the controller."""

    def __init__(self, action):
        self.action = action
        super().__init__(
            f"This action ({action.caption}) cannot be performed, because no handler was "
            f"registered for it in the controller, and there is no default handler."
        )
