"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class IntegrityError(DomainError):
    """Raised when tag associations and usage counts disagree."""

    pass


class UnitOfWorkError(DomainError):
    """Raised when a unit of work is used outside its lifecycle."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
