# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from logging import getLogger
from typing import Dict, List
import os

logger = getLogger(__name__)

class PostStore:
    """Where post files live.

    Implementations raise OSError (FileNotFoundError for a missing entry)
    on failure; the repository decides what each failure means.
    """
    extension: str = ".md"

    def ensure(self) -> None:
        raise NotImplementedError

    def list_names(self) -> List[str]:
        raise NotImplementedError

    def read(self, name: str) -> str:
        raise NotImplementedError

    def write(self, name: str, text: str) -> None:
        raise NotImplementedError

    def delete(self, name: str) -> None:
        raise NotImplementedError

    def describe(self) -> str:
        return type(self).__name__

class DirectoryPostStore(PostStore):
    """Posts as UTF-8 files in a single directory."""

    def __init__(self, root: str, extension: str = ".md"):
        self.root = root
        self.extension = extension

    def path_for(self, name: str) -> str:
        return os.path.join(self.root, name)

    def ensure(self) -> None:
        if not os.path.isdir(self.root):
            os.makedirs(self.root, exist_ok=True)
            logger.info(f"Created posts directory {self.root}")

    def list_names(self) -> List[str]:
        return sorted(name for name in os.listdir(self.root) if name.endswith(self.extension))

    def read(self, name: str) -> str:
        # Undecodable bytes become U+FFFD instead of failing the whole read
        with open(self.path_for(name), "r", encoding="utf-8", errors="replace") as file:
            return file.read()

    def write(self, name: str, text: str) -> None:
        # newline="" keeps "\n" as-is on every platform
        with open(self.path_for(name), "w", encoding="utf-8", newline="") as file:
            file.write(text)

    def delete(self, name: str) -> None:
        os.remove(self.path_for(name))

    def describe(self) -> str:
        return os.path.abspath(self.root)

class MemoryPostStore(PostStore):
    """Dict-backed store, used by the tests."""

    def __init__(self, extension: str = ".md", files: Dict[str, str] | None = None):
        self.extension = extension
        self.files: Dict[str, str] = dict(files or {})

    def ensure(self) -> None:
        pass

    def list_names(self) -> List[str]:
        return sorted(name for name in self.files if name.endswith(self.extension))

    def read(self, name: str) -> str:
        try:
            return self.files[name]
        except KeyError:
            raise FileNotFoundError(name) from None

    def write(self, name: str, text: str) -> None:
        self.files[name] = text

    def delete(self, name: str) -> None:
        try:
            del self.files[name]
        except KeyError:
            raise FileNotFoundError(name) from None

    def describe(self) -> str:
        return "<memory>"
