"""Module de gestion des erreurs."""

from linux_php_env.errors.base import ErrorHandler, ErrorHandlerChain
from linux_php_env.errors.exceptions import (ApplicationError,
                                             ConfigurationError,
                                             SystemRequirementError,
                                             AvailabilityError,
                                             ValidationError,
                                             PhpFpmError,
                                             InstallError,
                                             ServiceNameResolutionError,
                                             ConfigPathNotFound,
                                             VersionResolutionError,
                                             ServiceError,
                                             UnknownServiceError,
                                             ServiceCommandError)
from linux_php_env.errors.console_handler import ConsoleErrorHandler
from linux_php_env.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "SystemRequirementError",
    "AvailabilityError",
    "ValidationError",
    "PhpFpmError",
    "InstallError",
    "ServiceNameResolutionError",
    "ConfigPathNotFound",
    "VersionResolutionError",
    "ServiceError",
    "UnknownServiceError",
    "ServiceCommandError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
