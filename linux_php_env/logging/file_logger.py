"""Journal dans un fichier, doublé en option sur le terminal."""

import logging
import os
from typing import Any, Dict, Optional

from linux_php_env.logging.base import Logger

_FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_CONSOLE_FORMAT = "%(message)s"


def _logging_section(config: Optional[Dict[str, Any]]) -> tuple[int, str]:
    """Niveau et format de la section "logging" (INFO par défaut)."""
    section = (config or {}).get("logging", {})
    level_name = str(section.get("level", "INFO")).upper()
    return (
        getattr(logging, level_name, logging.INFO),
        section.get("format", _FILE_FORMAT),
    )


class FileLogger(Logger):
    """
    Logger écrivant dans log_file (UTF-8), par exemple
    ~/.valet/Log/linux-php-env.log.

    Un seul logging.Logger par fichier : une seconde instance sur le
    même fichier réutilise les handlers existants. Chaque message est
    vidé immédiatement sur disque et ne remonte pas au logger racine.
    Avec console_output, les messages sont aussi affichés sans
    horodatage sur stderr, ce qui rend visibles les notices de
    PhpFpm.
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[Dict[str, Any]] = None,
        console_output: bool = False
    ) -> None:
        """
        Args:
            log_file: Chemin du fichier ; son répertoire est créé au besoin
            config: Dictionnaire avec une section "logging" optionnelle
                (clés "level" et "format")
            console_output: Afficher aussi les messages dans le terminal
        """
        self.log_file = log_file
        level, fmt = _logging_section(config)

        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)

        self.logger = logging.getLogger(f"linux_php_env.{log_file}")
        self.logger.setLevel(level)
        self.logger.propagate = False

        if not self.logger.handlers:
            handler = logging.FileHandler(log_file, encoding="utf-8")
            handler.setFormatter(logging.Formatter(fmt))
            self.logger.addHandler(handler)
            if console_output:
                console = logging.StreamHandler()
                console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
                self.logger.addHandler(console)

    def _emit(self, level: int, message: str) -> None:
        self.logger.log(level, message)
        for handler in self.logger.handlers:
            handler.flush()

    def log_info(self, message: str) -> None:
        self._emit(logging.INFO, message)

    def log_warning(self, message: str) -> None:
        self._emit(logging.WARNING, message)

    def log_error(self, message: str) -> None:
        self._emit(logging.ERROR, message)
