"""Interface abstraite pour l'accès au système de fichiers."""

from abc import ABC, abstractmethod
from typing import Optional


class Filesystem(ABC):
    """Interface pour les opérations fichiers de l'orchestrateur."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Vérifie si un chemin existe.

        Args:
            path: Chemin à tester

        Returns:
            True si le chemin existe, False sinon
        """
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Vérifie si un chemin est un répertoire existant."""
        pass

    @abstractmethod
    def get(self, path: str) -> str:
        """
        Lit le contenu d'un fichier texte.

        Args:
            path: Chemin du fichier

        Returns:
            Contenu du fichier
        """
        pass

    @abstractmethod
    def put(self, path: str, content: str) -> None:
        """Écrit un fichier texte (propriétaire inchangé)."""
        pass

    @abstractmethod
    def put_as_user(self, path: str, content: str) -> None:
        """
        Écrit un fichier texte appartenant à l'utilisateur géré.

        Args:
            path: Chemin du fichier
            content: Contenu à écrire
        """
        pass

    @abstractmethod
    def unlink(self, path: str) -> None:
        """Supprime un fichier s'il existe."""
        pass

    @abstractmethod
    def read_link(self, path: str) -> str:
        """
        Résout un lien symbolique jusqu'à sa cible finale.

        Args:
            path: Chemin du lien

        Returns:
            Chemin de la cible finale
        """
        pass

    @abstractmethod
    def ensure_dir_exists(
        self,
        path: str,
        owner: Optional[str] = None
    ) -> None:
        """
        Crée un répertoire s'il n'existe pas encore.

        Args:
            path: Chemin du répertoire
            owner: Propriétaire à appliquer lors de la création
        """
        pass
