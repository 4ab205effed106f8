"""Contrat d'exécution des commandes système.

Les gestionnaires de paquets et de services ne lancent jamais de
processus eux-mêmes : ils passent par un CommandExecutor injecté,
ce qui permet de les tester avec un exécuteur scripté.

    - CommandResult : bilan immuable d'un processus terminé.
    - CommandExecutor : run() à implémenter, capture() fourni.
    - FailureHandler : callback (code, stderr) de capture().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

FailureHandler = Callable[[int, str], None]


@dataclass(frozen=True)
class CommandResult:
    """Bilan d'un processus (ex: `dpkg -l php8.1-fpm`).

    Attributes:
        command: Arguments passés au processus.
        return_code: Code de sortie (127 : binaire introuvable).
        stdout: Sortie standard, texte brut.
        stderr: Sortie d'erreur, texte brut.
        success: return_code == 0.
        duration: Temps écoulé en secondes.
        executed_as_root: Processus lancé avec l'uid 0.
    """

    command: List[str]
    return_code: int
    stdout: str
    stderr: str
    success: bool
    duration: float
    executed_as_root: bool = False


class CommandExecutor(ABC):
    """Lance des commandes sous forme de liste d'arguments, sans shell."""

    @abstractmethod
    def run(
        self,
        command: List[str],
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
        timeout: Optional[int] = None,
        read_only: bool = False,
    ) -> CommandResult:
        """Lance la commande et attend sa fin.

        Un code de sortie non nul n'est pas une exception : il est
        porté par le CommandResult.

        Args:
            command: Programme puis arguments.
            env: Variables ajoutées à l'environnement courant.
            cwd: Répertoire de travail.
            timeout: Délai maximal en secondes (None : illimité).
            read_only: La commande ne fait que lire l'état du système
                (which, dpkg -l, systemctl status) ; elle est lancée
                même en mode simulation.
        """
        pass

    def capture(
        self,
        command: List[str],
        on_error: Optional[FailureHandler] = None,
        read_only: bool = False,
    ) -> str:
        """Lance la commande et retourne sa sortie standard nettoyée.

        Sur code de sortie non nul, on_error reçoit (code, stderr) et
        peut lever une exception, qui se propage. Sans on_error, la
        sortie est retournée telle quelle, même vide.

        Example:
            >>> executor.capture(["which", "systemctl"], read_only=True)
            '/usr/bin/systemctl'
        """
        result = self.run(command, read_only=read_only)
        if not result.success and on_error is not None:
            on_error(result.return_code, result.stderr)
        return result.stdout.strip()
