from src.exceptions.base import AppError
from src.exceptions.service_exceptions import BodyRenderError, DocumentParseError, OutputWriteError

__all__ = [
    "AppError",
    "BodyRenderError",
    "DocumentParseError",
    "OutputWriteError",
]
