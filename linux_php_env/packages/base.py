"""Interface commune des gestionnaires de paquets.

Chaque variante (Apt, Dnf, Yum, Pacman, Eopkg) décrit une famille de
distributions : la commande de détection, la requête des paquets
installés, la commande d'installation, la correspondance des noms de
paquets et le modèle de nom du service PHP-FPM. Les variantes sont
immuables : tout ce qui les distingue est porté par des constantes de
classe.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, List, Tuple

from linux_php_env.commands.base import CommandExecutor
from linux_php_env.commands.builder import CommandBuilder
from linux_php_env.errors.exceptions import (
    ApplicationError,
    AvailabilityError,
    InstallError,
)
from linux_php_env.logging.base import Logger

VERSION_PLACEHOLDER = "{VERSION}"
COMPONENT_PLACEHOLDER = "{COMPONENT}"


class PackageManager(ABC):
    """Contrat d'un gestionnaire de paquets de distribution.

    Attributes:
        NAME: Nom affiché dans les notices (ex: "Apt").
        TOOL: Binaire dont la présence signale la distribution.
        PACKAGE_NAMES: Nom canonique → nom propre à la distribution.
        SUPPORTED_PHP_VERSIONS: Versions PHP gérées, de la plus récente
            à la plus ancienne.
        PHP_SERVICE_PATTERN: Modèle du service FPM avec {VERSION}.
        PHP_PACKAGE_PATTERN: Modèle des paquets PHP avec {VERSION} et
            {COMPONENT}.
        UNVERSIONED_SERVICE: Service FPM de la version par défaut, quand
            le binaire php ne porte pas de version.
        UNVERSIONED_PACKAGE_PATTERN: Modèle des paquets PHP de la version
            par défaut, avec {COMPONENT}.
        SUPPORTS_EXTENSIONS: False si l'installation des extensions
            PHP n'est pas prise en charge.
    """

    NAME: ClassVar[str]
    TOOL: ClassVar[str]
    PACKAGE_NAMES: ClassVar[Dict[str, str]] = {}
    SUPPORTED_PHP_VERSIONS: ClassVar[Tuple[str, ...]] = (
        "8.3", "8.2", "8.1", "8.0", "7.4", "7.3", "7.2", "7.1", "7.0",
    )
    PHP_SERVICE_PATTERN: ClassVar[str] = "php{VERSION}-fpm"
    PHP_PACKAGE_PATTERN: ClassVar[str] = "php{VERSION}-{COMPONENT}"
    UNVERSIONED_SERVICE: ClassVar[str] = "php-fpm"
    UNVERSIONED_PACKAGE_PATTERN: ClassVar[str] = "php-{COMPONENT}"
    SUPPORTS_EXTENSIONS: ClassVar[bool] = True

    def __init__(self, executor: CommandExecutor, logger: Logger) -> None:
        """
        Initialise le gestionnaire de paquets.

        Args:
            executor: Exécuteur des commandes système
            logger: Logger pour les notices de progression
        """
        self._executor = executor
        self._logger = logger

    @abstractmethod
    def packages(self, name_filter: str) -> List[str]:
        """
        Liste les paquets installés correspondant au filtre.

        Args:
            name_filter: Nom ou fragment de nom de paquet

        Returns:
            Noms des paquets installés, liste vide si aucun
        """
        pass

    @abstractmethod
    def _install_builder(self) -> CommandBuilder:
        """Retourne la commande d'installation, sans les paquets."""
        pass

    def installed(self, name: str) -> bool:
        """Vrai si et seulement si name figure dans packages(name)."""
        return name in self.packages(name)

    def ensure_installed(self, name: str) -> None:
        """
        Installe un paquet s'il ne l'est pas déjà.

        Raises:
            InstallError: Si la commande d'installation échoue
        """
        if not self.installed(name):
            self.install_or_fail([name])

    def ensure_all_installed(self, names: List[str]) -> None:
        """
        Installe en une seule commande les paquets manquants.

        Raises:
            InstallError: Si la commande d'installation échoue
        """
        missing = [name for name in names if not self.installed(name)]
        if missing:
            self.install_or_fail(missing)

    def install_or_fail(self, names: List[str]) -> None:
        """
        Installe les paquets donnés et lève une erreur en cas d'échec.

        Args:
            names: Paquets à installer

        Raises:
            InstallError: Porte le nom des paquets et le stderr capturé
        """
        package = " ".join(names)
        self._logger.log_info(
            f"[{package}] is not installed, installing it now "
            f"via {self.NAME}... 🍻"
        )

        def fail(return_code: int, stderr: str) -> None:
            self._logger.log_error(stderr.strip())
            raise InstallError(package, stderr, self.NAME)

        command = self._install_builder().with_args(names).build()
        self._executor.capture(command, on_error=fail)

    def is_available(self) -> bool:
        """
        Détecte la présence de l'outil de la distribution.

        Ne lève jamais d'exception : tout échec de la sonde vaut False.
        """
        def fail(return_code: int, stderr: str) -> None:
            raise AvailabilityError(f"{self.NAME} non disponible")

        try:
            return self._executor.capture(
                ["which", self.TOOL], on_error=fail, read_only=True
            ) != ""
        except (ApplicationError, OSError):
            return False

    def supported_php_versions(self) -> List[str]:
        """Versions PHP gérées, de la plus récente à la plus ancienne."""
        return list(self.SUPPORTED_PHP_VERSIONS)

    def get_php_service_pattern(self) -> str:
        return self.PHP_SERVICE_PATTERN

    def supports_extensions(self) -> bool:
        return self.SUPPORTS_EXTENSIONS

    def format_version(self, version: str) -> str:
        """Forme du tag de version dans les noms de paquets/services."""
        return version

    def php_service(self, version: str) -> str:
        """Nom candidat du service FPM pour une version (ex: php8.1-fpm).

        La version vide désigne le PHP par défaut (service php-fpm).
        """
        tag = self.format_version(version)
        if not tag:
            return self.UNVERSIONED_SERVICE
        return self.PHP_SERVICE_PATTERN.replace(VERSION_PLACEHOLDER, tag)

    def php_package(self, version: str, component: str) -> str:
        """Nom d'un paquet PHP versionné (ex: php8.1-fpm)."""
        tag = self.format_version(version)
        if not tag:
            return self.UNVERSIONED_PACKAGE_PATTERN.replace(
                COMPONENT_PLACEHOLDER, component
            )
        return (
            self.PHP_PACKAGE_PATTERN
            .replace(VERSION_PLACEHOLDER, tag)
            .replace(COMPONENT_PLACEHOLDER, component)
        )

    def package_name(self, canonical: str) -> str:
        """Traduit un nom canonique (ex: "redis") pour la distribution."""
        return self.PACKAGE_NAMES.get(canonical, canonical)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _filter_names(names: List[str], name_filter: str) -> List[str]:
    """Garde les noms contenant le filtre, dans l'ordre d'origine."""
    return [name for name in names if name_filter in name]
