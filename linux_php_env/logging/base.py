"""Interface de journalisation injectée dans tous les composants."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Journal des notices et des échecs.

    Les notices destinées à l'utilisateur ("Disabling php8.1-fpm...",
    installation de paquets) passent par log_info ; un échec toléré
    (service inconnu à l'arrêt, alias php non modifié) par
    log_warning ; un échec remonté à l'utilisateur par log_error.
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        pass
