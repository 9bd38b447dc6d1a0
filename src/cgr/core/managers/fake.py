"""Fake package manager for testing.

FakePackageManager keeps its registry in memory so commands can be exercised
without npm, yarn or pnpm installed.
"""

from cgr.core.errors import ManagerQueryError
from cgr.core.managers.abc import PackageManager


class FakePackageManager(PackageManager):
    """In-memory fake implementation of a package manager.

    Constructor Injection:
    - Initial registry and failure modes are provided via constructor parameters
    - set_registry() updates the in-memory registry so a later get sees it

    Examples:
        >>> npm = FakePackageManager("npm", registry="https://registry.npmjs.org/")
        >>> npm.set_registry("https://example.com/")
        >>> npm.get_registry()
        'https://example.com/'
        >>> npm.set_calls
        ['https://example.com/']

        # Simulate a manager that is not installed
        >>> broken = FakePackageManager("yarn", get_error="yarn: command not found")
    """

    def __init__(
        self,
        name: str,
        *,
        registry: str = "https://registry.npmjs.org/",
        get_error: str | None = None,
        set_error: str | None = None,
    ) -> None:
        """Create a fake manager.

        Args:
            name: Canonical manager name
            registry: Registry returned by get_registry(). Returned verbatim, so a
                value without a trailing "/" exercises normalization.
            get_error: If set, get_registry() raises ManagerQueryError with this message
            set_error: If set, set_registry() raises ManagerQueryError with this message
        """
        self._name = name
        self._registry = registry
        self._get_error = get_error
        self._set_error = set_error
        self._set_calls: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def get_registry(self) -> str:
        if self._get_error is not None:
            raise ManagerQueryError(self._name, self._get_error)
        return self._registry

    def set_registry(self, url: str) -> None:
        self._set_calls.append(url)
        if self._set_error is not None:
            raise ManagerQueryError(self._name, self._set_error)
        self._registry = url

    @property
    def registry(self) -> str:
        """Currently configured registry.

        This property is for test assertions only.
        """
        return self._registry

    @property
    def set_calls(self) -> list[str]:
        """Get the list of set_registry() calls that were made.

        This property is for test assertions only.
        """
        return self._set_calls.copy()
