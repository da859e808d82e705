from .base import AppError


class DocumentParseError(AppError):
    """Raised when a collection or environment document cannot be parsed."""

    def __init__(self, path: str, original_exception: Exception):
        self.path = path
        self.original_exception = original_exception
        super().__init__(f"Failed to parse document '{path}': {original_exception}")


class BodyRenderError(AppError):
    """Raised when a request body cannot be encoded."""

    def __init__(self, request_name: str, reason: str):
        self.request_name = request_name
        self.reason = reason
        super().__init__(f"Failed to render body of '{request_name}': {reason}")


class OutputWriteError(AppError):
    """Raised when a generated file or folder cannot be written."""

    def __init__(self, path: str, original_exception: Exception):
        self.path = path
        self.original_exception = original_exception
        super().__init__(f"Failed to write '{path}': {original_exception}")
