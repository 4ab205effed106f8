"""Paramètres de l'environnement PHP géré.

Les valeurs par défaut reproduisent l'installation classique :
répertoire ~/.valet de l'utilisateur qui a lancé sudo, pool FPM
valet.conf et binaire /usr/bin/php.
"""

import grp
import getpass
import os
import pwd
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from linux_php_env.config.loader import FileConfigLoader
from linux_php_env.errors.exceptions import ConfigurationError

DEFAULT_EXTENSIONS = [
    "common", "cli", "mysql", "gd", "zip", "xml",
    "curl", "mbstring", "pgsql", "mongodb", "intl",
]

VERSION_MARKER_NAME = "use_php_version"


def _default_user() -> str:
    """Utilisateur géré : celui qui a lancé sudo, sinon l'utilisateur courant."""
    return os.environ.get("SUDO_USER") or getpass.getuser()


def _primary_group(user: str) -> str:
    try:
        return grp.getgrgid(pwd.getpwnam(user).pw_gid).gr_name
    except KeyError:
        return user


def _home_of(user: str) -> str:
    try:
        return pwd.getpwnam(user).pw_dir
    except KeyError:
        return os.path.expanduser("~")


class EnvironmentSettings(BaseModel):
    """Configuration validée de l'environnement PHP.

    Attributes:
        user: Utilisateur propriétaire du pool FPM.
        group: Groupe du pool FPM (groupe principal de user par défaut).
        home_path: Répertoire de l'outil (marqueur de version, logs).
        log_path: Répertoire de logs garanti par PhpFpm.install().
        php_binary: Lien symbolique du binaire php par défaut.
        pool_config_name: Nom du fichier de pool écrit par l'outil.
        common_extensions: Extensions installées avec chaque version.
    """

    model_config = ConfigDict(extra="forbid")

    user: str = Field(default_factory=_default_user)
    group: Optional[str] = None
    home_path: Optional[str] = None
    log_path: Optional[str] = None
    php_binary: str = "/usr/bin/php"
    pool_config_name: str = "valet.conf"
    common_extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS)
    )

    @model_validator(mode="after")
    def _fill_derived_paths(self) -> "EnvironmentSettings":
        if self.group is None:
            self.group = _primary_group(self.user)
        if self.home_path is None:
            self.home_path = os.path.join(_home_of(self.user), ".valet")
        self.home_path = os.path.expanduser(self.home_path)
        if self.log_path is None:
            self.log_path = os.path.join(self.home_path, "Log")
        return self

    @property
    def version_marker(self) -> str:
        """Chemin du marqueur de version PHP épinglée."""
        return os.path.join(self.home_path, VERSION_MARKER_NAME)


def load_settings(
    config_path: Optional[Union[str, Path]] = None
) -> EnvironmentSettings:
    """
    Charge les paramètres depuis un fichier TOML ou JSON.

    Args:
        config_path: Chemin du fichier ; None ou fichier absent donne
            les valeurs par défaut.

    Returns:
        Paramètres validés

    Raises:
        ConfigurationError: Si le fichier est illisible ou invalide
    """
    if config_path is None or not Path(config_path).exists():
        return EnvironmentSettings()
    try:
        return FileConfigLoader().load(
            config_path, schema=EnvironmentSettings
        )
    except (PydanticValidationError, ValueError, OSError) as e:
        raise ConfigurationError(
            f"Configuration invalide ({config_path}): {e}"
        ) from e
