"""Module des gestionnaires de paquets de distribution.

Variantes disponibles :
    Apt : Debian, Ubuntu
    Dnf : Fedora, RHEL 8+
    Yum : RHEL/CentOS anciennes
    Pacman : Arch, Manjaro
    Eopkg : Solus
"""

from linux_php_env.packages.base import PackageManager
from linux_php_env.packages.apt import Apt
from linux_php_env.packages.dnf import Dnf, Yum
from linux_php_env.packages.pacman import Pacman
from linux_php_env.packages.eopkg import Eopkg
from linux_php_env.packages.detection import (
    PACKAGE_MANAGERS,
    detect_package_manager,
)

__all__ = [
    "PackageManager",
    "Apt",
    "Dnf",
    "Yum",
    "Pacman",
    "Eopkg",
    "PACKAGE_MANAGERS",
    "detect_package_manager",
]
