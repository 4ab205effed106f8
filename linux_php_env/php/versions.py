"""Tags de version PHP : validation et lecture depuis le binaire php."""

import os
import re

from linux_php_env.errors.exceptions import (
    ValidationError,
    VersionResolutionError,
)

DEFAULT_TOKEN = "default"

_VERSION_RE = re.compile(r"^\d+(\.\d+)*$")
_BINARY_RE = re.compile(r"^php(\d+(?:\.\d+)*)?$")


def validate_php_version(version: str) -> str:
    """Valide un tag de version (ex: "8.1").

    Raises:
        ValidationError: Si le tag n'est pas une suite de nombres
            séparés par des points.
    """
    if not version or not _VERSION_RE.match(version):
        raise ValidationError(f"Version PHP invalide : {version!r}")
    return version


def is_default_token(version: str | None) -> bool:
    """Vrai si version désigne la version par défaut du système."""
    return version is None or version.strip().lower() == DEFAULT_TOKEN


def version_from_binary(target: str) -> str:
    """Extrait le tag de version du nom du binaire php résolu.

    Exemple: /usr/bin/php8.1 → "8.1". Un binaire non versionné
    (/usr/bin/php sur Arch ou Fedora) donne "", la version par défaut.

    Raises:
        VersionResolutionError: Si le nom n'est pas celui d'un binaire
            php.
    """
    match = _BINARY_RE.match(os.path.basename(target))
    if match is None:
        raise VersionResolutionError(target)
    return match.group(1) or ""
