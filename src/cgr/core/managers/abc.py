"""Package manager registry operations abstraction."""

from abc import ABC, abstractmethod


class PackageManager(ABC):
    """Get and set the registry configured in one package manager.

    Implementations raise ManagerQueryError when the manager's config command
    fails. There is no retry; the caller decides whether the failure is fatal.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Canonical manager name ("npm", "yarn" or "pnpm")."""
        ...

    @abstractmethod
    def get_registry(self) -> str:
        """Return the registry URL currently configured, as printed by the manager.

        Raises:
            ManagerQueryError: If the config command fails
        """
        ...

    @abstractmethod
    def set_registry(self, url: str) -> None:
        """Configure the manager to use the registry at url.

        Raises:
            ManagerQueryError: If the config command fails
        """
        ...
