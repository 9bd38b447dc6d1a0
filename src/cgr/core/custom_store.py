"""Persistence of user-added registries.

The file is TOML with one table per registry:

    [foo]
    registry = "http://x.test/"
    home = "http://x.test"

It is read fully, changed in memory and rewritten whole. There is no locking.
"""

import logging
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

import tomlkit

from cgr.core.errors import PersistenceError, RegistryConflictError
from cgr.core.registries import RegistryEntry

logger = logging.getLogger(__name__)


class RegistryStore(ABC):
    """Load and save the custom registry mapping."""

    @abstractmethod
    def load(self) -> dict[str, RegistryEntry]:
        """Return custom registries in stored order, or {} if none exist."""
        ...

    @abstractmethod
    def save(self, entries: Mapping[str, RegistryEntry]) -> None:
        """Replace the stored registries with entries.

        Raises:
            PersistenceError: If the store cannot be written
        """
        ...


class RealRegistryStore(RegistryStore):
    """Registry store backed by a TOML file (~/.cgrrc)."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, RegistryEntry]:
        """Load custom registries.

        Raises:
            ValueError: If the file is not valid TOML or a table has no registry URL
        """
        if not self._path.exists():
            return {}

        try:
            data = tomllib.loads(self._path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed custom registry file {self._path}: {e}") from e

        entries: dict[str, RegistryEntry] = {}
        for name, table in data.items():
            if not isinstance(table, dict) or not table.get("registry"):
                raise ValueError(f"Missing 'registry' for '{name}' in {self._path}")
            home = table.get("home")
            entries[name] = RegistryEntry.create(
                name, str(table["registry"]), str(home) if home else None
            )
        return entries

    def save(self, entries: Mapping[str, RegistryEntry]) -> None:
        doc = tomlkit.document()
        for name, entry in entries.items():
            table = tomlkit.table()
            table["registry"] = entry.url
            if entry.home:
                table["home"] = entry.home
            doc[name] = table

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        except OSError as e:
            raise PersistenceError(self._path, str(e)) from e
        logger.debug("Wrote %d custom registries to %s", len(entries), self._path)


class FakeRegistryStore(RegistryStore):
    """In-memory registry store for testing.

    Examples:
        >>> store = FakeRegistryStore({"foo": RegistryEntry.create("foo", "http://x.test")})
        >>> store.load()["foo"].url
        'http://x.test/'
    """

    def __init__(
        self,
        entries: Mapping[str, RegistryEntry] | None = None,
        *,
        save_error: str | None = None,
    ) -> None:
        """Create store with initial entries.

        Args:
            entries: Initial custom registries
            save_error: If set, save() raises PersistenceError with this message
        """
        self._entries = dict(entries or {})
        self._save_error = save_error
        self._save_count = 0

    def load(self) -> dict[str, RegistryEntry]:
        return dict(self._entries)

    def save(self, entries: Mapping[str, RegistryEntry]) -> None:
        if self._save_error is not None:
            raise PersistenceError(Path("<memory>"), self._save_error)
        self._entries = dict(entries)
        self._save_count += 1

    @property
    def save_count(self) -> int:
        """Number of successful save() calls.

        This property is for test assertions only.
        """
        return self._save_count


def add_custom_registry(
    store: RegistryStore,
    catalog: Mapping[str, RegistryEntry],
    name: str,
    url: str,
    home: str | None = None,
) -> RegistryEntry:
    """Append a custom registry and persist the store.

    Args:
        store: Custom registry store to update
        catalog: Effective catalog; names in it cannot be reused
        name: Registry name
        url: Registry URL, normalized to end with "/"
        home: Optional homepage

    Raises:
        RegistryConflictError: If name is already in catalog
        PersistenceError: If the store cannot be written
    """
    if name in catalog:
        raise RegistryConflictError(name)

    entry = RegistryEntry.create(name, url, home)
    entries = store.load()
    entries[name] = entry
    store.save(entries)
    return entry


def remove_custom_registry(store: RegistryStore, name: str) -> None:
    """Remove name from the store and persist it; unknown names are ignored."""
    entries = store.load()
    if name not in entries:
        return
    del entries[name]
    store.save(entries)
