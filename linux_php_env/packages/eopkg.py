"""Gestionnaire de paquets Eopkg (Solus)."""

from typing import List

from linux_php_env.commands.builder import CommandBuilder
from linux_php_env.packages.base import PackageManager, _filter_names


class Eopkg(PackageManager):
    """Eopkg : requête via list-installed, installation via install -y."""

    NAME = "Eopkg"
    TOOL = "eopkg"
    PACKAGE_NAMES = {
        "redis": "redis",
        "mysql": "mariadb-server",
        "mariadb": "mariadb-server",
    }
    SUPPORTED_PHP_VERSIONS = ("8.3", "8.2", "8.1", "7.4")

    def packages(self, name_filter: str) -> List[str]:
        """Premier mot de chaque ligne de `eopkg list-installed`."""
        output = self._executor.capture(
            ["eopkg", "list-installed"], read_only=True
        )
        names = [line.split()[0] for line in output.splitlines()
                 if line.strip()]
        return _filter_names(names, name_filter)

    def _install_builder(self) -> CommandBuilder:
        return CommandBuilder("eopkg").with_options(["install", "-y"])
