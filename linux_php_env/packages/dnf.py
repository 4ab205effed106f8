"""Gestionnaires de paquets RPM : Dnf (Fedora, RHEL 8+) et Yum.

Les versions multiples de PHP viennent des collections Remi
(php81-php-fpm, php81-php-cli...) : le tag de version y perd son
point.
"""

from typing import List

from linux_php_env.commands.builder import CommandBuilder
from linux_php_env.packages.base import PackageManager, _filter_names


class Dnf(PackageManager):
    """Dnf : requête via rpm -qa, installation via dnf."""

    NAME = "Dnf"
    TOOL = "dnf"
    PACKAGE_NAMES = {
        "redis": "redis",
        "mysql": "mysql-server",
        "mariadb": "mariadb-server",
    }
    PHP_SERVICE_PATTERN = "php{VERSION}-php-fpm"
    PHP_PACKAGE_PATTERN = "php{VERSION}-php-{COMPONENT}"

    def packages(self, name_filter: str) -> List[str]:
        output = self._executor.capture(
            ["rpm", "-qa", "--queryformat", "%{NAME}\\n"], read_only=True
        )
        return _filter_names(output.splitlines(), name_filter)

    def format_version(self, version: str) -> str:
        return version.replace(".", "")

    def _install_builder(self) -> CommandBuilder:
        return CommandBuilder(self.TOOL).with_options(["install", "-y"])


class Yum(Dnf):
    """Yum : même base RPM que Dnf, pour les distributions plus anciennes."""

    NAME = "Yum"
    TOOL = "yum"
    SUPPORTED_PHP_VERSIONS = (
        "8.1", "8.0", "7.4", "7.3", "7.2", "7.1", "7.0",
    )
