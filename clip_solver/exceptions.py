"""Custom exceptions for clip-solver."""


class ClipSolverError(Exception):
    """Base exception class for clip-solver."""

    def __init__(self, message, original_error=None):
        super().__init__(message)
        self.original_error = original_error

    def __str__(self):
        base_msg = super().__str__()
        if self.original_error:
            return f"{base_msg} (Caused by: {type(self.original_error).__name__}: {self.original_error})"
        return base_msg


class ConfigError(ClipSolverError):
    """Required configuration is missing."""


class ClipboardAccessError(ClipSolverError):
    """The system clipboard could not be read."""


class CompletionError(ClipSolverError):
    """The completion request failed or returned an unusable body."""

    def __init__(self, message, original_error=None, status_code=None, body=None):
        super().__init__(message, original_error)
        self.status_code = status_code
        self.body = body
