from .error_handler import ErrorHandlerMiddleware, configuration_error_handler

__all__ = ["ErrorHandlerMiddleware", "configuration_error_handler"]
