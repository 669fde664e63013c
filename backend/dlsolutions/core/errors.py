"""Service-level exception taxonomy.

Services and repositories raise these; the handlers registered in
``dlsolutions.main`` turn them into ``{"detail": ...}`` JSON responses.
"""


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message

    @property
    def detail(self) -> str:
        """Message safe to return to the caller."""
        return self.message


class ValidationError(ServiceError):
    """Malformed or missing caller input."""

    status_code = 400
    public_message = "Invalid request"


class AuthError(ServiceError):
    """Missing, malformed or unresolvable credential."""

    status_code = 401
    public_message = "Unauthorized"


class NotFoundError(ServiceError):
    """Resource absent or not owned by the caller."""

    status_code = 404
    public_message = "Not found"


class ProcessorError(ServiceError):
    """Card processor call failed. The caller only sees a generic message."""

    status_code = 500
    public_message = "Payment processor error"

    @property
    def detail(self) -> str:
        return self.public_message


class StoreError(ServiceError):
    """Persistence failure. The caller only sees a generic message."""

    status_code = 500
    public_message = "Database error"

    @property
    def detail(self) -> str:
        return self.public_message


class UpstreamError(ServiceError):
    """Hosted completion API failed."""

    status_code = 502
    public_message = "Upstream service error"

    def __init__(self, message: str | None = None, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status
