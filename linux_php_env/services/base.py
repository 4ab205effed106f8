"""Interface commune des gestionnaires de services (systèmes d'init).

Contrat consommé par PhpFpm :
    - enable/disable/restart/stop sont idempotents ;
    - stop et disable d'un service inconnu ne sont qu'un avertissement ;
    - restart et enable d'un service inconnu lèvent UnknownServiceError,
      distincte de ServiceCommandError (service connu mais en échec).
"""

import re
from abc import ABC, abstractmethod
from typing import ClassVar, List

from linux_php_env.commands.base import CommandExecutor
from linux_php_env.errors.exceptions import (
    ApplicationError,
    AvailabilityError,
    ServiceCommandError,
    UnknownServiceError,
)
from linux_php_env.logging.base import Logger
from linux_php_env.services.validators import validate_service_name

# Verdict du système d'init, en début de ligne ; les lignes du journal
# (préfixées par l'horodatage) ne comptent pas
_NOT_FOUND_RE = re.compile(
    r"^\s*(?:Loaded:\s*)?not-found"
    r"|^\s*Unit \S+ (?:could )?not(?: be)? found"
    r"|^\s*Failed to \w+ \S+: .*"
    r"(?:not found|not loaded|no such unit|does not exist)"
    r"|^\s*\S+: unrecognized service",
    re.IGNORECASE | re.MULTILINE,
)


def is_not_found_status(status: str) -> bool:
    """Vrai si le texte de statut signale un service inconnu du système.

    Couvre systemd ("could not be found", "Loaded: not-found") et SysV
    ("unrecognized service"). Seules les lignes de verdict comptent :
    un "File not found." relayé par le journal d'un service actif
    n'en fait pas un service inconnu.
    """
    return _NOT_FOUND_RE.search(status or "") is not None


class ServiceManager(ABC):
    """Contrat d'un système d'init.

    Attributes:
        NAME: Nom affiché (ex: "Systemd").
        TOOL: Binaire dont la présence signale le système d'init.
    """

    NAME: ClassVar[str]
    TOOL: ClassVar[str]

    def __init__(self, executor: CommandExecutor, logger: Logger) -> None:
        """
        Initialise le gestionnaire de services.

        Args:
            executor: Exécuteur des commandes système
            logger: Logger pour les notices
        """
        self._executor = executor
        self._logger = logger

    @abstractmethod
    def _command(self, action: str, service: str) -> List[str]:
        """Commande réalisant action (enable, disable, stop, restart)."""
        pass

    @abstractmethod
    def status(self, service: str) -> str:
        """Texte brut du statut (stdout et stderr réunis)."""
        pass

    @abstractmethod
    def disabled(self, service: str) -> bool:
        """Vrai si le service est connu et non activé au démarrage."""
        pass

    def enable(self, service: str) -> None:
        self._apply("enable", service, tolerate_unknown=False)

    def disable(self, service: str) -> None:
        self._apply("disable", service, tolerate_unknown=True)

    def restart(self, service: str) -> None:
        self._apply("restart", service, tolerate_unknown=False)

    def stop(self, service: str) -> None:
        self._apply("stop", service, tolerate_unknown=True)

    def _status_text(self, command: List[str]) -> str:
        """Réunit stdout et stderr : le code retour ne fait pas foi."""
        result = self._executor.run(command, read_only=True)
        return "\n".join(
            part.strip() for part in (result.stdout, result.stderr)
            if part.strip()
        )

    def is_unknown(self, service: str) -> bool:
        return is_not_found_status(self.status(service))

    def print_status(self, service: str) -> None:
        """Affiche le statut lisible du service."""
        print(self.status(service))

    def is_available(self) -> bool:
        """Détecte le système d'init ; toute erreur de sonde vaut False."""
        def fail(return_code: int, stderr: str) -> None:
            raise AvailabilityError(f"{self.NAME} non disponible")

        try:
            return self._executor.capture(
                ["which", self.TOOL], on_error=fail, read_only=True
            ) != ""
        except (ApplicationError, OSError):
            return False

    def _apply(
        self,
        action: str,
        service: str,
        tolerate_unknown: bool
    ) -> None:
        """
        Exécute une action et classe l'échec éventuel.

        Un échec sur un service inconnu lève UnknownServiceError (ou
        n'est qu'un avertissement si tolerate_unknown) ; tout autre
        échec lève ServiceCommandError.
        """
        validate_service_name(service)

        def fail(return_code: int, stderr: str) -> None:
            if is_not_found_status(stderr) or self.is_unknown(service):
                if tolerate_unknown:
                    self._logger.log_warning(
                        f"{action} ignoré : service {service} inconnu."
                    )
                    return
                raise UnknownServiceError(service)
            raise ServiceCommandError(service, action, return_code, stderr)

        self._executor.capture(self._command(action, service), on_error=fail)
