"""Diffusion des erreurs terminales vers leurs destinations."""

import sys
from abc import ABC, abstractmethod


class ErrorHandler(ABC):
    """Une destination d'erreur : terminal, fichier de log..."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        pass


class ErrorHandlerChain:
    """Transmet chaque erreur à tous les handlers, dans l'ordre d'ajout.

    La CLI y enregistre d'abord le ConsoleErrorHandler, puis le
    LoggerErrorHandler dès que le fichier de log est connu : une
    erreur de configuration n'atteint donc que le terminal.

    Example:
        chain = ErrorHandlerChain(ConsoleErrorHandler())
        chain.add_handler(LoggerErrorHandler(logger))
        chain.handle(error)
    """

    def __init__(self, *handlers: ErrorHandler) -> None:
        self.handlers: list[ErrorHandler] = list(handlers)

    def add_handler(self, handler: ErrorHandler) -> None:
        self.handlers.append(handler)

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> None:
        """Diffuse l'erreur puis termine le processus avec exit_code."""
        self.handle(error)
        sys.exit(exit_code)
