"""Mise en forme des lignes annonçant une commande.

Une même commande est annoncée deux fois : dans le fichier de log
(texte brut) et, en mode dry-run, dans le terminal (ANSI). Les
commandes root (apt-get, systemctl...) portent le préfixe [ROOT] afin
de repérer d'un coup d'œil ce qui touche au système.
"""

import sys
from abc import ABC, abstractmethod
from typing import List


class CommandFormatter(ABC):
    """Construit les annonces ; les sous-classes n'en fixent que le style."""

    ROOT_PREFIX = "[ROOT]"
    USER_PREFIX = "[user]"

    def format_start(self, command: List[str], is_root: bool) -> str:
        """Annonce d'une commande sur le point d'être lancée."""
        return self._decorate(
            f"{self._prefix(is_root)} Exécution : {' '.join(command)}",
            is_root,
            dry_run=False,
        )

    def format_dry_run(self, command: List[str], is_root: bool) -> str:
        """Annonce d'une commande simulée (rien n'est lancé)."""
        return self._decorate(
            f"{self._prefix(is_root)} [dry-run] {' '.join(command)}",
            is_root,
            dry_run=True,
        )

    def _prefix(self, is_root: bool) -> str:
        return self.ROOT_PREFIX if is_root else self.USER_PREFIX

    @abstractmethod
    def _decorate(self, text: str, is_root: bool, dry_run: bool) -> str:
        """Applique le style propre à la destination."""
        pass


class PlainCommandFormatter(CommandFormatter):
    """Texte brut, pour le fichier de log.

    Example:
        [ROOT] Exécution : apt-get install -y php8.1-fpm
    """

    def _decorate(self, text: str, is_root: bool, dry_run: bool) -> str:
        return text


class AnsiCommandFormatter(CommandFormatter):
    """Couleurs ANSI pour le terminal, texte brut hors TTY.

    Jaune gras pour root, vert pour l'utilisateur, gris pour une
    simulation.
    """

    RESET = "\033[0m"
    ROOT_STYLE = "\033[1;33m"
    USER_STYLE = "\033[0;32m"
    DRY_STYLE = "\033[0;90m"

    def _is_tty(self) -> bool:
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _decorate(self, text: str, is_root: bool, dry_run: bool) -> str:
        if not self._is_tty():
            return text
        if dry_run:
            style = self.DRY_STYLE
        else:
            style = self.ROOT_STYLE if is_root else self.USER_STYLE
        return f"{style}{text}{self.RESET}"
