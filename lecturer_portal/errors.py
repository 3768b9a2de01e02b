class PortalError(Exception):
    """Base error for everything a screen or endpoint can surface to the user."""

    status_code = 400
    title = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.title
        super().__init__(self.message)


class DataAccessError(PortalError):
    status_code = 500
    title = "Data access error"


class ConstraintViolation(DataAccessError):
    # uniqueness / NOT NULL / CHECK / foreign key, message kept verbatim
    status_code = 409
    title = "Constraint violation"


class TransportError(DataAccessError):
    status_code = 503
    title = "Failed to fetch"


class AccessDenied(PortalError):
    status_code = 403
    title = "Access denied"


class NotFound(PortalError):
    status_code = 404
    title = "Not found"


class InvalidTransition(PortalError):
    status_code = 409
    title = "Invalid status transition"


class ValidationFailed(PortalError):
    status_code = 422
    title = "Invalid input"


class NotAuthenticated(PortalError):
    status_code = 401
    title = "Not authenticated"
