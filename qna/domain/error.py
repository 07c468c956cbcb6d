"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class MissingParametersError(ValidationError):
    """Raised when a required query or body parameter is absent."""

    def __init__(self, parameter: str | None = None):
        self.parameter = parameter
        super().__init__("Missing parameter")


class InvalidIdentifierError(ValidationError):
    """Raised when untrusted input cannot be turned into an identifier."""

    def __init__(self, raw: object, reason: str):
        self.raw = raw
        super().__init__(f"Invalid identifier {raw!r}: {reason}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    resource = "Resource"

    def __init__(self, identifier: object):
        self.identifier = identifier
        super().__init__(f"{self.resource} not found")


class QuestionNotFoundError(NotFoundError):
    """No question with the given identifier."""

    resource = "Question"


class AnswerNotFoundError(NotFoundError):
    """No answer for the given question or answer identifier."""

    resource = "Answer"


class AccountNotFoundError(NotFoundError):
    """No account with the given email or identifier."""

    resource = "Account"


class DuplicateIdentifierError(DomainError):
    """Raised when inserting a record whose key already exists."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Duplicate identifier: {resource} {identifier} already exists")


class StorageError(DomainError):
    """Raised when the underlying store fails (database errors)."""

    pass


class ProfanityServiceError(DomainError):
    """Raised when the external profanity service cannot censor text."""

    pass


class AuthError(DomainError):
    """Base authentication error."""

    message = "Authentication error"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(detail or self.message)


class WrongCredentialsError(AuthError):
    """Client id unknown or secret mismatch."""

    message = "Wrong credentials"


class MissingCredentialsError(AuthError):
    """Client id or secret left blank."""

    message = "Missing credentials"


class TokenCreationError(AuthError):
    """Token could not be signed."""

    message = "Token creation error"


class InvalidTokenError(AuthError):
    """Bearer token absent, malformed, expired or wrongly signed."""

    message = "Invalid token"
