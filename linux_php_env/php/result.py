"""États et résultat d'un changement de version PHP-FPM."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class SwitchState(StrEnum):
    """États de l'orchestrateur PhpFpm."""

    IDLE = "idle"
    SWITCHING = "switching"
    INSTALLED = "installed"
    FAILED = "failed"


@dataclass(frozen=True)
class SwitchResult:
    """Bilan d'un changement de version.

    En cas d'échec, final_version est la version restaurée et error
    l'erreur d'origine : l'appelant décide de la propager via
    raise_for_error().

    Attributes:
        previous_version: Version active avant le changement.
        requested_version: Version demandée (None : défaut système).
        final_version: Version active après le changement.
        error: Erreur récupérée pendant l'installation, ou None.
    """

    previous_version: str
    requested_version: Optional[str]
    final_version: str
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def state(self) -> SwitchState:
        """État terminal atteint par le changement."""
        return SwitchState.INSTALLED if self.succeeded else SwitchState.FAILED

    def raise_for_error(self) -> None:
        """Relève l'erreur d'origine si le changement a échoué."""
        if self.error is not None:
            raise self.error
