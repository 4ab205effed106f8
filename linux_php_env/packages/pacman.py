"""Gestionnaire de paquets Pacman (Arch, Manjaro)."""

from typing import List

from linux_php_env.commands.builder import CommandBuilder
from linux_php_env.packages.base import PackageManager, _filter_names


class Pacman(PackageManager):
    """Pacman : les extensions PHP sont compilées dans le paquet php.

    L'installation des extensions n'est donc pas prise en charge ;
    PhpFpm la saute avec un avertissement.
    """

    NAME = "Pacman"
    TOOL = "pacman"
    PACKAGE_NAMES = {
        "redis": "redis",
        "mysql": "mysql",
        "mariadb": "mariadb",
    }
    SUPPORTED_PHP_VERSIONS = ("8.3", "8.2", "8.1", "8.0", "7.4")
    PHP_SERVICE_PATTERN = "php-fpm{VERSION}"
    SUPPORTS_EXTENSIONS = False

    def packages(self, name_filter: str) -> List[str]:
        output = self._executor.capture(["pacman", "-Qq"], read_only=True)
        return _filter_names(output.splitlines(), name_filter)

    def format_version(self, version: str) -> str:
        return version.replace(".", "")

    def _install_builder(self) -> CommandBuilder:
        return CommandBuilder("pacman").with_options(
            ["--noconfirm", "--needed", "-S"]
        )
