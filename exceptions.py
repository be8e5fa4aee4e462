# exceptions.py


class EcoPlatformError(Exception):
    """Base class for errors raised by the eco platform."""


class RegistrationError(EcoPlatformError):
    """Registration was refused; `message` is shown to the user as is and
    `status` is the HTTP status the refusal maps to."""

    def __init__(self, message, status=400):
        super().__init__(message)
        self.message = message
        self.status = status


class ValidationError(RegistrationError):
    """The registration form was rejected before reaching the gateway."""


class InvalidImageError(EcoPlatformError):
    pass
