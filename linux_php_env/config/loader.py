"""Lecture des fichiers de paramètres TOML ou JSON."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Union

from pydantic import BaseModel


def _read_toml(path: Path) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


# Format choisi d'après l'extension du fichier
_READERS: Dict[str, Callable[[Path], Dict[str, Any]]] = {
    ".toml": _read_toml,
    ".json": _read_json,
}


class ConfigLoader(ABC):
    """Source de paramètres, substituable dans les tests."""

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Lit un fichier de paramètres.

        Args:
            config_path: Fichier à lire
            schema: Modèle pydantic ; None pour obtenir le dict brut

        Returns:
            Instance de schema, ou dict si schema est None
        """
        pass


class FileConfigLoader(ConfigLoader):
    """Chargeur TOML / JSON avec validation pydantic optionnelle.

    Example:
        settings = FileConfigLoader().load(
            "~/.config/linux-php-env.toml", schema=EnvironmentSettings
        )
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Extension inconnue, ou TOML/JSON mal formé
            TypeError: Si schema n'est pas un BaseModel
            pydantic.ValidationError: Si les données sont invalides
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        reader = _READERS.get(path.suffix.lower())
        if reader is None:
            raise ValueError(
                f"Extension non supportée: {path.suffix}. "
                f"Utilisez {' ou '.join(_READERS)}"
            )
        raw_config = reader(path)

        if schema is None:
            return raw_config
        if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
            raise TypeError(
                "Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )
        return schema.model_validate(raw_config)
