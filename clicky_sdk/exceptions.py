"""Exceptions for Clicky SDK."""


class ClickyError(Exception):
    """Base exception for Clicky SDK errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ClickyConfigError(ClickyError, ValueError):
    """Configuration error.

    Raised when:
    - Configuration input is not a mapping
    - Resolved options lack ``site_id`` or ``sitekey``
    """

    pass


class ClickyResponseError(ClickyError):
    """Unusable HTTP response (non-2xx status or empty body)."""

    pass
