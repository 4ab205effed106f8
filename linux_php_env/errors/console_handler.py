"""
    ConsoleErrorHandler (messages lisibles pour l'utilisateur)
"""
from linux_php_env.errors.base import ErrorHandler
from linux_php_env.errors.exceptions import (ApplicationError,
                                             AvailabilityError,
                                             ConfigPathNotFound,
                                             ConfigurationError,
                                             InstallError,
                                             ServiceError,
                                             ServiceNameResolutionError)

_DEFAULT_SOLUTIONS: dict[type[Exception], str] = {
    AvailabilityError: (
        "Distribution non supportée : apt, dnf, yum, pacman ou eopkg "
        "et systemd ou service sont requis."
    ),
    InstallError: "Consultez la sortie du gestionnaire de paquets ci-dessus.",
    ServiceNameResolutionError: (
        "Vérifiez que PHP-FPM est installé pour cette version."
    ),
    ConfigPathNotFound: (
        "Installez PHP-FPM ou créez le répertoire de pools de votre "
        "distribution."
    ),
    ServiceError: "Exécutez avec sudo ou vérifiez l'état du service.",
    ConfigurationError: "Vérifiez votre fichier de configuration.",
}


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur. La première classe de `solutions` compatible avec
    l'erreur (isinstance) l'emporte.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}.
                Remplace les suggestions par défaut si fourni.
        """
        self.base_error_type = base_error_type
        self.solutions = (
            solutions if solutions is not None else dict(_DEFAULT_SOLUTIONS)
        )

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {str(error)}")

        stderr = getattr(error, "stderr", "")
        if stderr:
            print(stderr.rstrip())

        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                print(f"\n🔧 Solution : {solution}")
                return
        print("\n🔧 Solution : Voir les suggestions ci-dessus.")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec "
            "ces informations."
        )
