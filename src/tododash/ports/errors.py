"""Error types raised through the repository ports."""


class TododashError(Exception):
    """Base class for failures surfaced to the caller."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class RequestError(TododashError):
    """Raised when the remote task service fails or is unreachable."""


class RepositoryError(TododashError):
    """Raised when the completion history or config store fails."""
