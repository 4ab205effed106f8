"""Gestionnaire de services SysV / upstart (commande service)."""

import glob
from typing import List

from linux_php_env.commands.base import CommandExecutor
from linux_php_env.logging.base import Logger
from linux_php_env.services.base import ServiceManager
from linux_php_env.services.validators import validate_service_name

_RC_DIRS = "/etc/rc[2-5].d"


class LinuxService(ServiceManager):
    """Services pilotés par `service` et `update-rc.d`.

    L'activation au démarrage se lit dans les liens S??<service> des
    répertoires de runlevels 2 à 5.
    """

    NAME = "LinuxService"
    TOOL = "service"

    def __init__(
        self,
        executor: CommandExecutor,
        logger: Logger,
        rc_dirs: str = _RC_DIRS
    ) -> None:
        super().__init__(executor, logger)
        self._rc_dirs = rc_dirs

    def _command(self, action: str, service: str) -> List[str]:
        if action in ("enable", "disable"):
            return ["update-rc.d", service, action]
        return ["service", service, action]

    def status(self, service: str) -> str:
        validate_service_name(service)
        return self._status_text(["service", service, "status"])

    def disabled(self, service: str) -> bool:
        if self.is_unknown(service):
            return False
        return not glob.glob(f"{self._rc_dirs}/S[0-9][0-9]{service}")
