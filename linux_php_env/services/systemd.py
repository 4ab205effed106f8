"""Gestionnaire de services systemd."""

import re
from typing import List

from linux_php_env.services.base import ServiceManager
from linux_php_env.services.validators import validate_service_name

# Ligne "Loaded: loaded (/lib/systemd/system/x.service; disabled; ...)"
_DISABLED_RE = re.compile(r"Loaded:.*;\s*disabled\s*[;)]")


class Systemd(ServiceManager):
    """Systemd : toutes les actions passent par systemctl."""

    NAME = "Systemd"
    TOOL = "systemctl"

    def _command(self, action: str, service: str) -> List[str]:
        return ["systemctl", action, service]

    def status(self, service: str) -> str:
        """
        Sortie de `systemctl status`, quel que soit le code retour.

        systemctl sort en code 3 pour un service arrêté et 4 pour un
        service inconnu : le texte seul fait foi.
        """
        validate_service_name(service)
        return self._status_text(["systemctl", "status", service])

    def disabled(self, service: str) -> bool:
        return _DISABLED_RE.search(self.status(service)) is not None
