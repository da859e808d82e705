class AppError(Exception):
    """Base class for all application errors."""
