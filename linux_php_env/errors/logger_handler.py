"""
    LoggerErrorHandler (trace des erreurs dans le fichier de log)
"""
from linux_php_env.errors.base import ErrorHandler
from linux_php_env.errors.exceptions import ApplicationError
from linux_php_env.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Écrit l'erreur dans le Logger injecté.

    La sortie d'erreur capturée d'une commande (InstallError,
    ServiceCommandError) est ajoutée sur une seconde ligne, ce qui garde
    dans le log la raison donnée par apt, dnf ou systemctl.
    """

    def __init__(
        self,
        logger: Logger,
        base_error_type: type[Exception] = ApplicationError
    ) -> None:
        """
        Args:
            logger: Destination des erreurs.
            base_error_type: Racine des erreurs connues ; les autres sont
                signalées comme inattendues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        summary = f"{type(error).__name__}: {error}"
        if not isinstance(error, self.base_error_type):
            summary = f"Erreur inattendue: {summary}"

        stderr = getattr(error, "stderr", "")
        if stderr and stderr.strip():
            summary = f"{summary}\n{stderr.strip()}"
        self.logger.log_error(summary)
