"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateEmailError(DomainError):
    """Raised when an email already belongs to another user."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User with email {email} already exists")


class InvalidAgeError(ValidationError):
    """Raised when an age falls outside the accepted range."""

    def __init__(self, value: int, minimum: int, maximum: int):
        self.value = value
        super().__init__(f"Age must be between {minimum} and {maximum}, got {value}")
