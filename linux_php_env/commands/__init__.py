"""Exécution des commandes système (gestionnaires de paquets, init).

    CommandExecutor / CommandResult : contrat et bilan d'exécution.
    LinuxCommandExecutor : implémentation subprocess, avec dry-run.
    CommandBuilder : assemblage des commandes d'installation.
    PlainCommandFormatter / AnsiCommandFormatter : annonces log et
        terminal.
"""

from linux_php_env.commands.base import (
    CommandResult,
    CommandExecutor,
    FailureHandler,
)
from linux_php_env.commands.builder import CommandBuilder
from linux_php_env.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
    AnsiCommandFormatter,
)
from linux_php_env.commands.runner import (
    COMMAND_NOT_FOUND,
    LinuxCommandExecutor,
)

__all__ = [
    # Structures de données
    "CommandResult",
    "FailureHandler",
    # Interface abstraite
    "CommandExecutor",
    # Constructeur
    "CommandBuilder",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    # Implémentation Linux
    "COMMAND_NOT_FOUND",
    "LinuxCommandExecutor",
]
