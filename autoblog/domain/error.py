"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyExistsError(DomainError):
    """Raised when creating a resource whose key is already taken."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class RevisionConflictError(DomainError):
    """Raised when a conditional write observes a newer revision."""

    def __init__(self, resource: str, identifier: str, expected: int):
        self.resource = resource
        self.identifier = identifier
        self.expected = expected
        super().__init__(
            f"{resource} {identifier} changed since revision {expected}"
        )


class ConcurrencyConflictError(DomainError):
    """Raised when a ledger write keeps losing the compare-and-swap race."""

    def __init__(self, identifier: str, attempts: int):
        self.identifier = identifier
        self.attempts = attempts
        super().__init__(
            f"Could not update {identifier} after {attempts} attempts"
        )


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to access {resource} {resource_id}"
        )


class InsufficientCreditError(DomainError):
    """Raised when the ledger refuses to debit a generation."""

    def __init__(self, user_id: str, cost: int):
        self.user_id = user_id
        self.cost = cost
        super().__init__(f"Insufficient credits for {user_id}: {cost} required")


class GenerationInProgressError(DomainError):
    """Raised when a wizard session already has an outstanding generation."""

    def __init__(self, wizard_session_id: str):
        self.wizard_session_id = wizard_session_id
        super().__init__(
            f"A generation is already running for session {wizard_session_id}"
        )


class GenerationErrorKind(str, Enum):
    """Why a generation call did not produce a usable blog."""

    NETWORK = "network"
    PROVIDER = "provider"
    SCHEMA_VIOLATION = "schema_violation"


class GenerationError(DomainError):
    """Raised by the generation client when a single call fails."""

    def __init__(self, kind: GenerationErrorKind, message: str):
        self.kind = kind
        super().__init__(message)


class GenerationFailedError(DomainError):
    """Raised to the caller when a debited generation attempt failed.

    ``refunded`` tells whether the debited credit was given back.
    """

    def __init__(self, kind: GenerationErrorKind, refunded: bool, cause: str):
        self.kind = kind
        self.refunded = refunded
        self.cause = cause
        if refunded:
            message = "Blog generation failed. Your credit has been refunded."
        else:
            message = (
                "Blog generation failed and the credit refund could not be "
                "completed. Please contact support."
            )
        super().__init__(message)


class IdentityErrorKind(str, Enum):
    """Outcomes of the identity bridge that route the caller to a flow."""

    UNAUTHENTICATED = "unauthenticated"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_REGISTERED = "not_registered"
    ALREADY_EXISTS = "already_exists"


class IdentityError(DomainError):
    """Raised by the identity bridge with a typed kind."""

    def __init__(self, kind: IdentityErrorKind, message: str):
        self.kind = kind
        super().__init__(message)


class ProviderUnavailableError(DomainError):
    """Raised by provider clients when the provider could not be reached."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")
