"""Sélection du système d'init par sondage de disponibilité."""

from typing import Sequence, Type

from linux_php_env.commands.base import CommandExecutor
from linux_php_env.errors.exceptions import AvailabilityError
from linux_php_env.logging.base import Logger
from linux_php_env.services.base import ServiceManager
from linux_php_env.services.systemd import Systemd
from linux_php_env.services.sysv import LinuxService

SERVICE_MANAGERS: tuple[Type[ServiceManager], ...] = (Systemd, LinuxService)


def detect_service_manager(
    executor: CommandExecutor,
    logger: Logger,
    variants: Sequence[Type[ServiceManager]] = SERVICE_MANAGERS,
) -> ServiceManager:
    """
    Retourne le premier système d'init disponible.

    Raises:
        AvailabilityError: Si aucune variante n'est disponible
    """
    for variant in variants:
        manager = variant(executor, logger)
        if manager.is_available():
            logger.log_info(f"Gestionnaire de services : {variant.NAME}")
            return manager
    raise AvailabilityError(
        "Aucun gestionnaire de services supporté trouvé "
        f"({', '.join(v.NAME for v in variants)})."
    )
