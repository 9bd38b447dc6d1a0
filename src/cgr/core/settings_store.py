"""Persistence of the optional-manager toggles (~/.cgrcf).

The file is a JSON object mapping manager name to true; a missing key means
the manager is disabled.
"""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

from cgr.core.errors import PersistenceError

logger = logging.getLogger(__name__)


class SettingsStore(ABC):
    """Load and save which optional managers are enabled."""

    @abstractmethod
    def load(self) -> dict[str, bool]: ...

    @abstractmethod
    def save(self, settings: Mapping[str, bool]) -> None:
        """Replace the stored settings.

        Raises:
            PersistenceError: If the settings cannot be written
        """
        ...

    def is_enabled(self, manager: str) -> bool:
        return bool(self.load().get(manager, False))


class RealSettingsStore(SettingsStore):
    """Settings store backed by a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, bool]:
        """Load settings, or {} if the file does not exist.

        Raises:
            ValueError: If the file is not a JSON object of booleans
        """
        if not self._path.exists():
            return {}

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed settings file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {self._path} must contain a JSON object")

        settings: dict[str, bool] = {}
        for key, value in data.items():
            if not isinstance(value, bool):
                raise ValueError(f"Setting '{key}' in {self._path} must be true or false")
            settings[str(key)] = value
        return settings

    def save(self, settings: Mapping[str, bool]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(dict(settings)), encoding="utf-8")
        except OSError as e:
            raise PersistenceError(self._path, str(e)) from e
        logger.debug("Wrote settings to %s: %s", self._path, dict(settings))


class FakeSettingsStore(SettingsStore):
    """In-memory settings store for testing."""

    def __init__(
        self,
        settings: Mapping[str, bool] | None = None,
        *,
        save_error: str | None = None,
    ) -> None:
        self._settings = dict(settings or {})
        self._save_error = save_error
        self._save_count = 0

    def load(self) -> dict[str, bool]:
        return dict(self._settings)

    def save(self, settings: Mapping[str, bool]) -> None:
        if self._save_error is not None:
            raise PersistenceError(Path("<memory>"), self._save_error)
        self._settings = dict(settings)
        self._save_count += 1

    @property
    def save_count(self) -> int:
        """Number of successful save() calls.

        This property is for test assertions only.
        """
        return self._save_count
