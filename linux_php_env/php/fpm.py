"""Orchestrateur PHP-FPM : installation, configuration et changement
de version.

PhpFpm est le seul appelant des gestionnaires de paquets et de
services. Son état tient dans deux éléments :
    - l'attribut version, version active de l'instance ;
    - le marqueur de version (settings.version_marker), dont la
      présence épingle une version et dont l'absence signifie
      « suivre la version par défaut du système ».

Example:
    Changement de version avec propagation explicite de l'erreur :

        fpm = PhpFpm(pm, sm, executor, files, settings, logger)
        result = fpm.change_version("7.4", update_cli=True)
        result.raise_for_error()
"""

from pathlib import Path
from typing import List, Optional

from linux_php_env.commands.base import CommandExecutor
from linux_php_env.config.settings import EnvironmentSettings
from linux_php_env.errors.exceptions import (
    ConfigPathNotFound,
    PhpFpmError,
    ServiceError,
    ServiceNameResolutionError,
    VersionResolutionError,
)
from linux_php_env.filesystem.base import Filesystem
from linux_php_env.logging.base import Logger
from linux_php_env.packages.base import PackageManager
from linux_php_env.php.result import SwitchResult, SwitchState
from linux_php_env.php.versions import (
    is_default_token,
    validate_php_version,
    version_from_binary,
)
from linux_php_env.services.base import ServiceManager, is_not_found_status

STUB_PATH = Path(__file__).resolve().parent.parent / "stubs" / "fpm.conf"

# Premier répertoire existant retenu ; {version} = "8.1", {compact} = "81"
FPM_CONFIG_CANDIDATES = (
    "/etc/php/{version}/fpm/pool.d",        # Debian, Ubuntu
    "/etc/php{version}/fpm/pool.d",         # Ubuntu (anciens PPA)
    "/etc/php{version}/php-fpm.d",          # Manjaro
    "/etc/opt/remi/php{compact}/php-fpm.d",  # Fedora, RHEL (Remi)
    "/etc/php-fpm.d",                       # Fedora
    "/etc/php/php-fpm.d",                   # Arch
    "/etc/php7/fpm/php-fpm.d",              # openSUSE PHP 7
    "/etc/php8/fpm/php-fpm.d",              # openSUSE PHP 8
)

# Composant du paquet qui fournit le service FPM
FPM_COMPONENT = "fpm"


class PhpFpm:
    """Installe, configure et bascule les versions de PHP-FPM.

    Attributes:
        pm: Gestionnaire de paquets de la distribution.
        sm: Gestionnaire de services du système d'init.
        executor: Exécuteur pour les commandes hors paquets/services.
        files: Accès au système de fichiers.
        settings: Paramètres de l'environnement.
        version: Version PHP active de l'instance.
        state: État courant de l'orchestrateur.
    """

    def __init__(
        self,
        pm: PackageManager,
        sm: ServiceManager,
        executor: CommandExecutor,
        files: Filesystem,
        settings: EnvironmentSettings,
        logger: Logger,
    ) -> None:
        """
        Initialise l'orchestrateur et lit la version active.

        Raises:
            VersionResolutionError: Sans marqueur, si le binaire php
                par défaut n'est pas un binaire php
        """
        self.pm = pm
        self.sm = sm
        self.executor = executor
        self.files = files
        self.settings = settings
        self.logger = logger
        self.state = SwitchState.IDLE
        self.version = self.get_version()

    # ------------------------------------------------------------------
    # Installation
    # ------------------------------------------------------------------

    def install(self) -> None:
        """
        Installe et configure PHP-FPM pour la version active.

        Le paquet, les extensions et l'activation du service ne sont
        traités que si le paquet FPM est absent ; la configuration du
        pool et le redémarrage sont systématiques.

        Raises:
            InstallError: Si l'installation d'un paquet échoue
            ServiceNameResolutionError: Si le service reste introuvable
            ConfigPathNotFound: Si aucun répertoire de pools n'existe
        """
        package = self.pm.php_package(self.version, FPM_COMPONENT)
        if not self.pm.installed(package):
            self.pm.ensure_installed(package)
            self.install_extensions()
            self.sm.enable(self.fpm_service_name())

        self.files.ensure_dir_exists(
            self.settings.log_path, self.settings.user
        )
        self.install_configuration()
        self.restart()

    def uninstall(self) -> None:
        """Supprime le pool géré et arrête le service ; sinon ne fait rien."""
        try:
            pool_file = self._pool_config_file()
        except ConfigPathNotFound:
            self.logger.log_info(
                "Aucun répertoire de pools PHP-FPM : rien à désinstaller."
            )
            return
        if self.files.exists(pool_file):
            self.files.unlink(pool_file)
            self.stop()

    def install_extensions(self) -> None:
        """
        Installe les extensions communes pour la version active.

        Sautée avec un avertissement si le gestionnaire de paquets ne
        prend pas en charge les extensions.

        Raises:
            InstallError: Si l'installation échoue
        """
        if not self.pm.supports_extensions():
            self.logger.log_warning(
                "PHP Extension install is not supported for "
                f"{self.pm.NAME} package manager"
            )
            return
        self.pm.ensure_all_installed(self._extension_packages())

    def install_configuration(self) -> None:
        """Écrit le pool géré en substituant utilisateur, groupe et home."""
        contents = self.files.get(str(STUB_PATH))
        replacements = {
            "VALET_USER": self.settings.user,
            "VALET_GROUP": self.settings.group,
            "VALET_HOME_PATH": self.settings.home_path,
        }
        for token, value in replacements.items():
            contents = contents.replace(token, value)
        self.files.put_as_user(self._pool_config_file(), contents)

    def update_cli_alias(self) -> None:
        """Fait pointer l'alternative php vers la version active.

        Un échec n'est qu'un avertissement. Sans version (binaire php
        non versionné), il n'y a pas d'alternative à choisir.
        """
        if not self.version:
            self.logger.log_info(
                "PHP non versionné : alias php laissé inchangé."
            )
            return
        binary_dir = str(Path(self.settings.php_binary).parent)
        target = f"{binary_dir}/php{self.version}"

        def warn(return_code: int, stderr: str) -> None:
            self.logger.log_warning(
                f"Impossible de faire pointer php vers {target} "
                f"(code {return_code}) : {stderr.strip()}"
            )

        self.executor.capture(
            ["update-alternatives", "--set", "php", target], on_error=warn
        )

    # ------------------------------------------------------------------
    # Service
    # ------------------------------------------------------------------

    def restart(self) -> None:
        self.sm.restart(self.fpm_service_name())

    def stop(self) -> None:
        self.sm.stop(self.fpm_service_name())

    def status(self) -> None:
        self.sm.print_status(self.fpm_service_name())

    # ------------------------------------------------------------------
    # Changement de version
    # ------------------------------------------------------------------

    def change_version(
        self,
        version: Optional[str] = None,
        update_cli: bool = False,
        install_ext: bool = False,
    ) -> SwitchResult:
        """
        Bascule PHP-FPM vers une autre version.

        L'ancien service est arrêté et désactivé, puis la nouvelle
        version est installée. Si l'installation échoue, la version
        précédente est restaurée et la suite (réactivation du service,
        marqueur, alias, extensions) s'exécute quand même avec la
        version restaurée. L'erreur d'origine est portée par le
        résultat.

        Args:
            version: Version cible ; None ou "default" désignent la
                version par défaut du système, marqueur ignoré
            update_cli: Mettre à jour l'alias du binaire php
            install_ext: (Ré)installer les extensions communes

        Returns:
            Bilan du changement (version finale et erreur éventuelle)

        Raises:
            ValidationError: Si le tag de version est mal formé ; rien
                n'est modifié dans ce cas
            OSError: Erreur d'écriture hors installation ; state passe
                à FAILED et l'erreur est propagée
        """
        if not is_default_token(version):
            version = validate_php_version(version.strip())
            if version not in self.pm.supported_php_versions():
                self.logger.log_warning(
                    f"PHP {version} n'est pas dans la liste des versions "
                    f"supportées par {self.pm.NAME}."
                )

        self.state = SwitchState.SWITCHING
        try:
            result = self._switch(version, update_cli, install_ext)
        except Exception:
            self.state = SwitchState.FAILED
            raise
        self.state = result.state
        return result

    def _switch(
        self,
        version: Optional[str],
        update_cli: bool,
        install_ext: bool,
    ) -> SwitchResult:
        requested = version
        old_version = self.version
        error: Optional[Exception] = None

        old_service = self.pm.php_service(old_version)
        self.sm.stop(old_service)
        self.logger.log_info(f"Disabling {old_service}...")
        self.sm.disable(old_service)

        try:
            if is_default_token(version):
                version = self.get_version(real=True)
            self.version = version
            self.install()
        except (PhpFpmError, ServiceError) as e:
            self.version = old_version
            error = e
            self.logger.log_error(f"{type(e).__name__}: {e}")

        service = self.pm.php_service(self.version)
        if self.sm.disabled(service):
            self.logger.log_info(f"Enabling {service}...")
            self.sm.enable(service)

        self._persist_version()

        if update_cli:
            self.update_cli_alias()
        if install_ext:
            try:
                self.install_extensions()
            except PhpFpmError as e:
                error = error or e

        if error is not None:
            self.logger.log_info("Changing version failed")

        return SwitchResult(
            previous_version=old_version,
            requested_version=requested,
            final_version=self.version,
            error=error,
        )

    def _persist_version(self) -> None:
        """Épingle la version active, ou retire le marqueur si elle est
        la version par défaut du système."""
        try:
            default_version = self.get_version(real=True)
        except VersionResolutionError:
            default_version = None

        marker = self.settings.version_marker
        if self.version != default_version:
            self.files.ensure_dir_exists(
                self.settings.home_path, self.settings.user
            )
            self.files.put_as_user(marker, self.version)
        else:
            self.files.unlink(marker)

    # ------------------------------------------------------------------
    # Résolution
    # ------------------------------------------------------------------

    def get_version(self, real: bool = False) -> str:
        """
        Retourne la version épinglée, ou la version par défaut.

        Args:
            real: Ignorer le marqueur et lire le binaire php par défaut

        Raises:
            VersionResolutionError: Si le binaire résolu n'est pas un
                binaire php ; un binaire non versionné donne ""
        """
        marker = self.settings.version_marker
        if not real and self.files.exists(marker):
            return self.files.get(marker).strip()
        target = self.files.read_link(self.settings.php_binary)
        return version_from_binary(target)

    def fpm_service_name(self) -> str:
        """
        Nom du service FPM de la version active.

        Raises:
            ServiceNameResolutionError: Si le système d'init ne connaît
                pas le service
        """
        service = self.pm.php_service(self.version)
        if is_not_found_status(self.sm.status(service)):
            raise ServiceNameResolutionError(service, self.version)
        return service

    def fpm_config_path(self) -> str:
        """
        Premier répertoire de pools existant pour la version active.

        Raises:
            ConfigPathNotFound: Si aucun candidat n'existe
        """
        candidates = self._config_candidates()
        for path in candidates:
            if self.files.is_dir(path):
                return path
        raise ConfigPathNotFound(candidates)

    def _config_candidates(self) -> List[str]:
        if not self.version:
            return [t for t in FPM_CONFIG_CANDIDATES if "{" not in t]
        compact = self.version.replace(".", "")
        return [
            template.format(version=self.version, compact=compact)
            for template in FPM_CONFIG_CANDIDATES
        ]

    def _pool_config_file(self) -> str:
        return f"{self.fpm_config_path()}/{self.settings.pool_config_name}"

    def _extension_packages(self) -> List[str]:
        return [
            self.pm.php_package(self.version, extension)
            for extension in self.settings.common_extensions
        ]
