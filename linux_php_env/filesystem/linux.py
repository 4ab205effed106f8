"""Implémentation Linux de l'accès au système de fichiers."""

import os
import shutil
from pathlib import Path
from typing import Optional

from linux_php_env.filesystem.base import Filesystem
from linux_php_env.logging.base import Logger


class LinuxFilesystem(Filesystem):
    """
    Implémentation Linux du système de fichiers.

    Les écritures et suppressions sont loggées via l'instance Logger.
    Les erreurs d'entrée/sortie sont loggées puis propagées.
    En dry-run, les lectures sont réelles et les écritures seulement
    annoncées.
    """

    def __init__(
        self,
        logger: Logger,
        user: Optional[str] = None,
        dry_run: bool = False
    ) -> None:
        """
        Initialise le gestionnaire de fichiers.

        Args:
            logger: Instance de Logger pour le logging
            user: Utilisateur propriétaire des fichiers écrits par
                put_as_user (None : propriétaire inchangé)
            dry_run: Annoncer les écritures sans toucher au disque
        """
        self.logger = logger
        self.user = user
        self.dry_run = dry_run

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def get(self, path: str) -> str:
        """
        Lit le contenu d'un fichier.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as e:
            self.logger.log_error(
                f"Erreur lors de la lecture du fichier {path}: {e}"
            )
            raise

    def put(self, path: str, content: str) -> None:
        if self._simulated(f"écriture de {path}"):
            return
        try:
            Path(path).write_text(content, encoding="utf-8")
            self.logger.log_info(f"Fichier {path} écrit avec succès.")
        except OSError as e:
            self.logger.log_error(
                f"Erreur lors de l'écriture du fichier {path}: {e}"
            )
            raise

    def put_as_user(self, path: str, content: str) -> None:
        """
        Écrit un fichier puis le donne à l'utilisateur géré.

        Args:
            path: Chemin du fichier
            content: Contenu à écrire
        """
        self.put(path, content)
        if self.user and not self.dry_run:
            shutil.chown(path, user=self.user)

    def unlink(self, path: str) -> None:
        """Supprime un fichier ; ne fait rien s'il est absent."""
        if self._simulated(f"suppression de {path}"):
            return
        try:
            Path(path).unlink(missing_ok=True)
            self.logger.log_info(f"Fichier {path} supprimé.")
        except OSError as e:
            self.logger.log_error(
                f"Erreur lors de la suppression du fichier {path}: {e}"
            )
            raise

    def read_link(self, path: str) -> str:
        """
        Suit toute la chaîne de liens symboliques.

        Exemple: /usr/bin/php → /etc/alternatives/php → /usr/bin/php8.1
        retourne /usr/bin/php8.1.
        """
        return os.path.realpath(path)

    def ensure_dir_exists(
        self,
        path: str,
        owner: Optional[str] = None
    ) -> None:
        """
        Crée un répertoire (et ses parents) s'il est absent.

        Le propriétaire n'est appliqué qu'à la création : un répertoire
        existant n'est pas modifié.
        """
        directory = Path(path)
        if directory.is_dir() or self._simulated(f"création de {path}"):
            return
        directory.mkdir(parents=True, exist_ok=True)
        if owner:
            shutil.chown(directory, user=owner)
        self.logger.log_info(f"Répertoire {path} créé.")

    def _simulated(self, action: str) -> bool:
        if self.dry_run:
            self.logger.log_info(f"[dry-run] {action}")
        return self.dry_run
