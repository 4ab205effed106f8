"""Module d'orchestration PHP-FPM.

Classes disponibles :
    PhpFpm : Installation, configuration et changement de version.
    SwitchResult : Bilan d'un changement de version.
    SwitchState : États de l'orchestrateur.
"""

from linux_php_env.php.fpm import (
    FPM_CONFIG_CANDIDATES,
    PhpFpm,
)
from linux_php_env.php.result import SwitchResult, SwitchState
from linux_php_env.php.versions import (
    is_default_token,
    validate_php_version,
    version_from_binary,
)

__all__ = [
    "FPM_CONFIG_CANDIDATES",
    "PhpFpm",
    "SwitchResult",
    "SwitchState",
    "is_default_token",
    "validate_php_version",
    "version_from_binary",
]
