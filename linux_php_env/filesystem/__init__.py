"""Module de gestion des fichiers."""

from linux_php_env.filesystem.base import Filesystem
from linux_php_env.filesystem.linux import LinuxFilesystem

__all__ = [
    "Filesystem",
    "LinuxFilesystem",
]
