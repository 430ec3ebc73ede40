"""Domain layer errors.

Every error carries a stable ``error_type`` tag that the interface layer
returns to clients alongside the human-readable message.
"""


class DomainError(Exception):
    """Base domain error."""

    error_type = "DOMAIN_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed input: bad pagination bounds, empty or oversized content."""

    error_type = "VALIDATION_ERROR"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    error_type = "NOT_FOUND"

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidParentError(DomainError):
    """Raised when a reply's parent belongs to a different post."""

    error_type = "INVALID_PARENT"

    def __init__(self, parent_id: object, post_id: object):
        self.parent_id = parent_id
        self.post_id = post_id
        super().__init__("Parent comment must belong to the same post")


class MaxDepthExceededError(DomainError):
    """Raised when a reply would nest deeper than the allowed depth."""

    error_type = "MAX_DEPTH_EXCEEDED"

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            f"Maximum comment nesting depth exceeded ({max_depth} levels)"
        )


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    error_type = "FORBIDDEN"

    def __init__(self, resource: str, resource_id: object, user_id: object):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when a concurrent request changed the row being modified."""

    error_type = "CONFLICT"
