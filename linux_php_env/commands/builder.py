"""Assemblage des commandes d'installation des gestionnaires de paquets.

Chaque variante décrit sa commande sans les paquets ; PackageManager
y ajoute les noms au moment d'installer :

    CommandBuilder("pacman").with_options(["--noconfirm", "--needed", "-S"])
        .with_args(["php-fpm"]).build()
    → ["pacman", "--noconfirm", "--needed", "-S", "php-fpm"]
"""

from typing import List


class CommandBuilder:
    """Liste d'arguments construite par chaînage.

    Les options sont toujours placées avant les arguments positionnels,
    quel que soit l'ordre des appels.
    """

    def __init__(self, program: str) -> None:
        """
        Args:
            program: Binaire à lancer (ex: "apt-get").

        Raises:
            ValueError: Si program est vide.
        """
        if not program or not program.strip():
            raise ValueError("Le programme est requis.")
        self._program = program
        self._options: List[str] = []
        self._args: List[str] = []

    def with_options(self, options: List[str]) -> "CommandBuilder":
        self._options.extend(options)
        return self

    def with_flag(self, flag: str) -> "CommandBuilder":
        self._options.append(flag)
        return self

    def with_args(self, args: List[str]) -> "CommandBuilder":
        """Ajoute des arguments positionnels (ex: noms de paquets)."""
        self._args.extend(args)
        return self

    def build(self) -> List[str]:
        return [self._program, *self._options, *self._args]
