"""Sélection du gestionnaire de paquets par sondage de disponibilité."""

from typing import Sequence, Type

from linux_php_env.commands.base import CommandExecutor
from linux_php_env.errors.exceptions import AvailabilityError
from linux_php_env.logging.base import Logger
from linux_php_env.packages.apt import Apt
from linux_php_env.packages.base import PackageManager
from linux_php_env.packages.dnf import Dnf, Yum
from linux_php_env.packages.eopkg import Eopkg
from linux_php_env.packages.pacman import Pacman

# Ordre de sondage : Dnf avant Yum (yum est souvent un alias de dnf)
PACKAGE_MANAGERS: tuple[Type[PackageManager], ...] = (
    Apt, Dnf, Pacman, Yum, Eopkg,
)


def detect_package_manager(
    executor: CommandExecutor,
    logger: Logger,
    variants: Sequence[Type[PackageManager]] = PACKAGE_MANAGERS,
) -> PackageManager:
    """
    Retourne la première variante dont is_available() est vraie.

    Args:
        executor: Exécuteur partagé par la variante retenue
        logger: Logger partagé par la variante retenue
        variants: Variantes candidates, dans l'ordre de sondage

    Returns:
        Instance de la variante retenue

    Raises:
        AvailabilityError: Si aucune variante n'est disponible
    """
    for variant in variants:
        manager = variant(executor, logger)
        if manager.is_available():
            logger.log_info(f"Gestionnaire de paquets : {variant.NAME}")
            return manager
    raise AvailabilityError(
        "Aucun gestionnaire de paquets supporté trouvé "
        f"({', '.join(v.NAME for v in variants)})."
    )
