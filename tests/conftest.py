"""Doublures partagées par les tests."""

from typing import Dict, List, Optional, Tuple

import pytest

from linux_php_env.commands.base import CommandExecutor, CommandResult
from linux_php_env.filesystem.base import Filesystem


class FakeExecutor(CommandExecutor):
    """Exécuteur scripté : chaque commande connue renvoie une réponse fixe.

    Les commandes non scriptées réussissent avec une sortie vide.
    capture() est celui de CommandExecutor.
    """

    def __init__(self) -> None:
        self.responses: Dict[Tuple[str, ...], Tuple[int, str, str]] = {}
        self.calls: List[List[str]] = []
        self.read_only_calls: List[List[str]] = []

    def script(
        self,
        command: List[str],
        return_code: int = 0,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.responses[tuple(command)] = (return_code, stdout, stderr)

    def run(self, command, env=None, cwd=None, timeout=None,
            read_only=False):
        self.calls.append(list(command))
        if read_only:
            self.read_only_calls.append(list(command))
        return_code, stdout, stderr = self.responses.get(
            tuple(command), (0, "", "")
        )
        return CommandResult(
            command=list(command),
            return_code=return_code,
            stdout=stdout,
            stderr=stderr,
            success=return_code == 0,
            duration=0.0,
        )


class InMemoryFilesystem(Filesystem):
    """Système de fichiers en mémoire (fichiers, répertoires, liens)."""

    def __init__(self, user: Optional[str] = None) -> None:
        self.user = user
        self.files: Dict[str, str] = {}
        self.dirs: set = set()
        self.links: Dict[str, str] = {}
        self.owners: Dict[str, Optional[str]] = {}

    def exists(self, path):
        return path in self.files or path in self.dirs or path in self.links

    def is_dir(self, path):
        return path in self.dirs

    def get(self, path):
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def put(self, path, content):
        self.files[path] = content

    def put_as_user(self, path, content):
        self.files[path] = content
        self.owners[path] = self.user

    def unlink(self, path):
        self.files.pop(path, None)

    def read_link(self, path):
        seen = set()
        while path in self.links and path not in seen:
            seen.add(path)
            path = self.links[path]
        return path

    def ensure_dir_exists(self, path, owner=None):
        if path not in self.dirs:
            self.dirs.add(path)
            self.owners[path] = owner


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def memory_fs() -> InMemoryFilesystem:
    return InMemoryFilesystem(user="alice")
