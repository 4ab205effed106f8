"""Exécuteur de commandes réel, basé sur subprocess.

Chaque commande est annoncée dans le log avec le préfixe [ROOT] ou
[user]. En mode dry-run seules les lectures (read_only) sont lancées ;
les autres commandes sont annoncées (aussi dans le terminal si un
formateur console est fourni) et réputées réussies, ce qui permet de prévisualiser un `linux-php-env use 7.4`.

Example:
    executor = LinuxCommandExecutor(logger=logger)
    result = executor.run(["systemctl", "status", "php8.1-fpm"])
    if not result.success:
        ...
"""

import os
import subprocess  # nosec B404
import time
from typing import Dict, List, Optional

from linux_php_env.commands.base import CommandExecutor, CommandResult
from linux_php_env.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from linux_php_env.logging.base import Logger

# Code de sortie du shell pour "commande introuvable"
COMMAND_NOT_FOUND = 127

# Code de sortie retenu quand le délai est dépassé
TIMED_OUT = -1


class LinuxCommandExecutor(CommandExecutor):
    """Lance les commandes via subprocess.run, sorties capturées en texte.

    Attributes:
        dry_run: Simuler au lieu de lancer.
        is_root: Le processus courant tourne avec l'uid 0.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        default_timeout: Optional[int] = None,
        dry_run: bool = False,
        console_formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """
        Args:
            logger: Destination des annonces et des échecs.
            default_timeout: Délai appliqué quand run() n'en reçoit
                pas ; None laisse les commandes tourner sans limite
                (une installation apt peut être longue).
            dry_run: Simuler au lieu de lancer.
            console_formatter: Formateur des annonces terminal, par
                exemple AnsiCommandFormatter().
        """
        self._logger = logger
        self._default_timeout = default_timeout
        self._plain = PlainCommandFormatter()
        self._console_formatter = console_formatter
        self.dry_run = dry_run
        self.is_root = os.getuid() == 0

    def run(
        self,
        command: List[str],
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
        timeout: Optional[int] = None,
        read_only: bool = False,
    ) -> CommandResult:
        """Lance la commande ; les échecs sont logués, jamais levés.

        Un binaire introuvable (OSError) donne le code 127 avec le
        message système en stderr, comme dans un shell. Un délai
        dépassé donne le code -1. En dry-run, seules les commandes
        read_only sont réellement lancées.
        """
        if self.dry_run and not read_only:
            self._announce(command, dry_run=True)
            return self._result(command, 0, "", "", 0.0)

        self._announce(command, dry_run=False)
        if timeout is None:
            timeout = self._default_timeout
        full_env = {**os.environ, **env} if env else None
        cmd_str = " ".join(command)

        start = time.monotonic()
        try:
            proc = subprocess.run(  # nosec B603
                command,
                capture_output=True,
                text=True,
                env=full_env,
                cwd=cwd,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            self._error(f"Délai de {timeout}s dépassé : {cmd_str}")
            return self._result(
                command, TIMED_OUT, _text(e.stdout), _text(e.stderr),
                time.monotonic() - start,
            )
        except OSError as e:
            self._error(f"Lancement impossible ({e}) : {cmd_str}")
            return self._result(
                command, COMMAND_NOT_FOUND, "", str(e),
                time.monotonic() - start,
            )

        if proc.returncode != 0:
            self._error(f"Code de sortie {proc.returncode} : {cmd_str}")
        return self._result(
            command, proc.returncode, proc.stdout, proc.stderr,
            time.monotonic() - start,
        )

    def _announce(self, command: List[str], dry_run: bool) -> None:
        if dry_run:
            line = self._plain.format_dry_run(command, self.is_root)
        else:
            line = self._plain.format_start(command, self.is_root)
        if self._logger:
            self._logger.log_info(line)
        if self._console_formatter:
            formatter = self._console_formatter
            print(
                formatter.format_dry_run(command, self.is_root) if dry_run
                else formatter.format_start(command, self.is_root)
            )

    def _error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _result(
        self,
        command: List[str],
        return_code: int,
        stdout: str,
        stderr: str,
        duration: float,
    ) -> CommandResult:
        return CommandResult(
            command=command,
            return_code=return_code,
            stdout=stdout,
            stderr=stderr,
            success=return_code == 0,
            duration=duration,
            executed_as_root=self.is_root,
        )


def _text(output) -> str:
    """Sortie partielle d'un TimeoutExpired (str, bytes ou None)."""
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(errors="replace")
    return output
