"""Fonctions de validation pour les noms de services."""

import re

from linux_php_env.errors.exceptions import ValidationError


# Nom de service : lettres, chiffres, points, tirets, underscores, '@', ':'
_SERVICE_NAME_RE = re.compile(r'^[a-zA-Z0-9][a-zA-Z0-9@:._-]*$')


def validate_service_name(name: str) -> str:
    """Valide un nom de service avant de le passer à une commande.

    Les points sont acceptés (php8.1-fpm) mais pas la séquence '..'.

    Args:
        name: Nom de service à valider.

    Returns:
        Le nom validé.

    Raises:
        ValidationError: Si le nom est invalide.
    """
    if not name:
        raise ValidationError("Le nom de service ne peut pas être vide")
    if '..' in name or '/' in name:
        raise ValidationError(
            f"Nom de service invalide (traversée interdite) : {name!r}"
        )
    if not _SERVICE_NAME_RE.match(name):
        raise ValidationError(f"Nom de service invalide : {name!r}")
    return name
