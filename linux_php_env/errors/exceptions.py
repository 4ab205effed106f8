"""
Exceptions personnalisées de linux_php_env.

Toutes les erreurs métier dérivent d'ApplicationError, ce qui permet
aux handlers de distinguer les erreurs connues des erreurs inattendues.
"""
from typing import Optional, Sequence


class ApplicationError(Exception):
    """Exception de base pour toute l'application."""
    pass


class ConfigurationError(ApplicationError):
    """Fichier de configuration illisible ou invalide."""
    pass


class SystemRequirementError(ApplicationError):
    """Exception de base pour les prérequis système."""
    pass


class AvailabilityError(SystemRequirementError):
    """Aucun gestionnaire de paquets ou de services supporté trouvé."""
    pass


class ValidationError(ApplicationError):
    """Donnée invalide (tag de version, nom de service)."""
    pass


class PhpFpmError(ApplicationError):
    """Exception de base pour les opérations PHP-FPM.

    Ces erreurs sont récupérables par le rollback du changement
    de version.
    """
    pass


class InstallError(PhpFpmError):
    """La commande d'installation d'un paquet a échoué.

    Attributes:
        package: Nom du ou des paquets concernés.
        stderr: Sortie d'erreur capturée de la commande.
    """

    def __init__(
        self,
        package: str,
        stderr: str = "",
        manager: Optional[str] = None
    ) -> None:
        self.package = package
        self.stderr = stderr
        self.manager = manager
        tool = manager or "Le gestionnaire de paquets"
        super().__init__(f"{tool} n'a pas pu installer [{package}].")


class ServiceNameResolutionError(PhpFpmError):
    """La version PHP ne correspond à aucun service FPM connu."""

    def __init__(self, service: str, version: str) -> None:
        self.service = service
        self.version = version
        super().__init__(
            f"Impossible de déterminer le service PHP-FPM "
            f"pour la version {version} ({service} introuvable)."
        )


class ConfigPathNotFound(PhpFpmError):
    """Aucun répertoire de configuration de pool FPM reconnu."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates = list(candidates)
        super().__init__(
            "Impossible de déterminer le répertoire de configuration "
            "PHP-FPM."
        )


class VersionResolutionError(PhpFpmError):
    """La version par défaut ne peut pas être lue depuis le binaire php."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(
            f"Impossible d'extraire une version PHP de {target!r}."
        )


class ServiceError(ApplicationError):
    """Exception de base pour le gestionnaire de services."""

    def __init__(self, service: str, message: str) -> None:
        self.service = service
        super().__init__(message)


class UnknownServiceError(ServiceError):
    """Le service n'est pas connu du système d'init."""

    def __init__(self, service: str) -> None:
        super().__init__(
            service, f"Le service {service} est inconnu du système d'init."
        )


class ServiceCommandError(ServiceError):
    """Une commande du système d'init a échoué sur un service connu."""

    def __init__(
        self,
        service: str,
        action: str,
        return_code: int,
        stderr: str = ""
    ) -> None:
        self.action = action
        self.return_code = return_code
        self.stderr = stderr
        super().__init__(
            service,
            f"Échec de '{action}' sur {service} "
            f"(code {return_code}) : {stderr.strip()}"
        )
