"""Module des gestionnaires de services (systèmes d'init).

Variantes disponibles :
    Systemd : systemctl
    LinuxService : service / update-rc.d (SysV, upstart)
"""

from linux_php_env.services.base import ServiceManager, is_not_found_status
from linux_php_env.services.systemd import Systemd
from linux_php_env.services.sysv import LinuxService
from linux_php_env.services.detection import (
    SERVICE_MANAGERS,
    detect_service_manager,
)
from linux_php_env.services.validators import validate_service_name

__all__ = [
    "ServiceManager",
    "is_not_found_status",
    "Systemd",
    "LinuxService",
    "SERVICE_MANAGERS",
    "detect_service_manager",
    "validate_service_name",
]
