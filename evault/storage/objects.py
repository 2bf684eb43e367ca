"""
Object storage for encrypted blobs.

Names are flat and unique within a store. Stores never see plaintext.
"""
import logging
import os
from abc import ABC, abstractmethod

from werkzeug.utils import secure_filename

from evault.errors import StorageFailure

logger = logging.getLogger(__name__)


class ObjectStore(ABC):

    @abstractmethod
    def store(self, name: str, data: bytes) -> None:
        """Save ``data`` under ``name``. Existing names are never overwritten."""

    @abstractmethod
    def fetch(self, name: str) -> bytes:
        """Return the bytes stored under ``name``."""

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove ``name``. Removing a missing name is not an error."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        ...

    @staticmethod
    def check_name(name):
        if not name or secure_filename(name) != name:
            raise StorageFailure(f"Invalid object name: {name!r}")
        return name


class LocalObjectStore(ObjectStore):
    """One file per object inside ``root``."""

    def __init__(self, root):
        self.root = root
        os.makedirs(self.root, exist_ok=True)

    def _path(self, name):
        return os.path.join(self.root, self.check_name(name))

    def store(self, name, data):
        path = self._path(name)
        try:
            # "xb" fails if the name is already taken
            with open(path, "xb") as f:
                f.write(data)
        except FileExistsError as e:
            raise StorageFailure(f"Object already exists: {name}") from e
        except OSError as e:
            raise StorageFailure(f"Could not store object {name}") from e
        logger.debug("Stored object %s (%d bytes)", name, len(data))

    def fetch(self, name):
        path = self._path(name)
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise StorageFailure(f"Could not fetch object {name}") from e

    def delete(self, name):
        path = self._path(name)
        try:
            os.remove(path)
        except FileNotFoundError:
            pass  # file missing is fine
        except OSError as e:
            raise StorageFailure(f"Could not delete object {name}") from e
        logger.debug("Deleted object %s", name)

    def exists(self, name):
        return os.path.isfile(self._path(name))


class MemoryObjectStore(ObjectStore):

    def __init__(self):
        self.objects = {}

    def store(self, name, data):
        self.check_name(name)
        if name in self.objects:
            raise StorageFailure(f"Object already exists: {name}")
        self.objects[name] = bytes(data)

    def fetch(self, name):
        self.check_name(name)
        try:
            return self.objects[name]
        except KeyError as e:
            raise StorageFailure(f"Could not fetch object {name}") from e

    def delete(self, name):
        self.check_name(name)
        self.objects.pop(name, None)

    def exists(self, name):
        return name in self.objects
