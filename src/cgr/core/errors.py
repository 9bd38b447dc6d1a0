"""Exceptions raised by cgr operations.

Fatal errors (``AllManagersFailedError``, ``PersistenceError``) are turned into
an ``Error:`` message and exit code 1 by ``cli_error_boundary``. The not-found
and conflict errors are user mistakes; commands report them and exit 0.
"""

from pathlib import Path


class CgrError(Exception):
    """Base class for cgr errors."""


class ManagerQueryError(CgrError):
    """A package manager's config get/set invocation failed."""

    def __init__(self, manager: str, message: str) -> None:
        super().__init__(message)
        self.manager = manager
        self.message = message


class AllManagersFailedError(CgrError):
    """Every queried package manager failed."""

    def __init__(self, failures: list[ManagerQueryError]) -> None:
        self.failures = list(failures)
        super().__init__("\n".join(failure.message for failure in self.failures))


class RegistryNotFoundError(CgrError):
    """Registry name is not in the catalog or the custom store."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Not find registry: {name}")
        self.name = name


class RegistryConflictError(CgrError):
    """A registry with this name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Registry '{name}' already exists")
        self.name = name


class PersistenceError(CgrError):
    """Writing one of the cgr files failed."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Failed to write {path}: {message}")
        self.path = path
