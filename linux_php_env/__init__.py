"""
Linux PHP Env - Environnement de développement PHP local sous Linux.

Modules disponibles:
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
- config: Chargement des paramètres (TOML, JSON, Pydantic)
- commands: Exécution de commandes système (LinuxCommandExecutor)
- filesystem: Accès au système de fichiers (LinuxFilesystem)
- packages: Gestionnaires de paquets (Apt, Dnf, Yum, Pacman, Eopkg)
- services: Gestionnaires de services (Systemd, LinuxService)
- php: Orchestrateur PHP-FPM (PhpFpm)
"""

__version__ = "1.0.0"

from linux_php_env.logging import Logger, FileLogger
from linux_php_env.config import (
    ConfigLoader,
    FileConfigLoader,
    EnvironmentSettings,
    load_settings,
)
from linux_php_env.commands import (
    CommandResult,
    CommandExecutor,
    CommandBuilder,
    LinuxCommandExecutor,
)
from linux_php_env.filesystem import Filesystem, LinuxFilesystem
from linux_php_env.packages import (
    PackageManager,
    Apt,
    Dnf,
    Yum,
    Pacman,
    Eopkg,
    detect_package_manager,
)
from linux_php_env.services import (
    ServiceManager,
    Systemd,
    LinuxService,
    detect_service_manager,
    is_not_found_status,
)
from linux_php_env.php import PhpFpm, SwitchResult, SwitchState

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "EnvironmentSettings",
    "load_settings",
    # Commands
    "CommandResult",
    "CommandExecutor",
    "CommandBuilder",
    "LinuxCommandExecutor",
    # Filesystem
    "Filesystem",
    "LinuxFilesystem",
    # Packages
    "PackageManager",
    "Apt",
    "Dnf",
    "Yum",
    "Pacman",
    "Eopkg",
    "detect_package_manager",
    # Services
    "ServiceManager",
    "Systemd",
    "LinuxService",
    "detect_service_manager",
    "is_not_found_status",
    # PHP-FPM
    "PhpFpm",
    "SwitchResult",
    "SwitchState",
]
