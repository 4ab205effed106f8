"""Journalisation : interface Logger et FileLogger (fichier + terminal)."""

from linux_php_env.logging.base import Logger
from linux_php_env.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
