"""Gestionnaire de paquets Apt (Debian, Ubuntu et dérivées)."""

from typing import List

from linux_php_env.commands.builder import CommandBuilder
from linux_php_env.packages.base import PackageManager

# Préfixe dpkg d'un paquet voulu et installé
_INSTALLED_STATE = "ii"


class Apt(PackageManager):
    """Apt : requête via dpkg, installation via apt-get."""

    NAME = "Apt"
    TOOL = "apt-get"
    PACKAGE_NAMES = {
        "redis": "redis-server",
        "mysql": "mysql-server",
        "mariadb": "mariadb-server",
    }

    def packages(self, name_filter: str) -> List[str]:
        """
        Liste les paquets installés selon dpkg -l.

        Seules les lignes d'état "ii" sont retenues ; le suffixe
        d'architecture (":amd64") est retiré.
        """
        output = self._executor.capture(
            ["dpkg", "-l", name_filter], read_only=True
        )
        names = []
        for line in output.splitlines():
            fields = line.split()
            if len(fields) >= 2 and fields[0] == _INSTALLED_STATE:
                names.append(fields[1].split(":", 1)[0])
        return names

    def _install_builder(self) -> CommandBuilder:
        return CommandBuilder("apt-get").with_options(["install", "-y"])
