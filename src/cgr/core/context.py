"""Application context with dependency injection."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from cgr.core.custom_store import RealRegistryStore, RegistryStore
from cgr.core.managers import (
    MANAGER_ORDER,
    OPTIONAL_MANAGERS,
    PackageManager,
    RealPackageManager,
)
from cgr.core.paths import CgrPaths
from cgr.core.prober import LatencyProber, RealLatencyProber
from cgr.core.registries import RegistryEntry, load_builtin_catalog, merge_catalogs
from cgr.core.settings_store import RealSettingsStore, SettingsStore


@dataclass(frozen=True)
class CgrContext:
    """Immutable context holding all dependencies for cgr commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    managers holds an adapter for every supported manager; use
    enabled_managers() to get the ones a command should touch. The stores are
    read on demand, so each invocation sees the files as they are now.
    """

    paths: CgrPaths
    catalog: Mapping[str, RegistryEntry]
    managers: Mapping[str, PackageManager]
    custom_store: RegistryStore
    settings_store: SettingsStore
    prober: LatencyProber

    def is_manager_enabled(self, name: str) -> bool:
        if name not in OPTIONAL_MANAGERS:
            return True
        return self.settings_store.is_enabled(name)

    def enabled_managers(self) -> list[PackageManager]:
        """Managers to query or update, in order npm, yarn, pnpm."""
        settings = self.settings_store.load()
        return [
            self.managers[name]
            for name in MANAGER_ORDER
            if name in self.managers and (name not in OPTIONAL_MANAGERS or settings.get(name))
        ]

    def effective_catalog(self) -> dict[str, RegistryEntry]:
        """Built-in catalog overlaid with the custom registries."""
        return merge_catalogs(self.catalog, self.custom_store.load())

    @staticmethod
    def for_test(
        managers: Mapping[str, PackageManager] | None = None,
        custom_store: RegistryStore | None = None,
        settings_store: SettingsStore | None = None,
        prober: LatencyProber | None = None,
        catalog: Mapping[str, RegistryEntry] | None = None,
        paths: CgrPaths | None = None,
    ) -> "CgrContext":
        """Create test context with optional pre-configured fakes.

        Args:
            managers: Adapters by name. If None, fake npm, yarn and pnpm all
                pointing at the npm registry.
            custom_store: If None, an empty FakeRegistryStore.
            settings_store: If None, an empty FakeSettingsStore (pnpm disabled).
            prober: If None, a FakeLatencyProber with default timings.
            catalog: If None, the packaged built-in catalog.
            paths: If None, paths under /test/home.

        Example:
            >>> npm = FakePackageManager("npm", registry="https://example.com/")
            >>> yarn = FakePackageManager("yarn")
            >>> ctx = CgrContext.for_test(managers={"npm": npm, "yarn": yarn})
        """
        from cgr.core.custom_store import FakeRegistryStore
        from cgr.core.managers.fake import FakePackageManager
        from cgr.core.prober.fake import FakeLatencyProber
        from cgr.core.settings_store import FakeSettingsStore

        if managers is None:
            managers = {name: FakePackageManager(name) for name in MANAGER_ORDER}

        if custom_store is None:
            custom_store = FakeRegistryStore()

        if settings_store is None:
            settings_store = FakeSettingsStore()

        if prober is None:
            prober = FakeLatencyProber()

        if catalog is None:
            catalog = load_builtin_catalog()

        if paths is None:
            paths = CgrPaths.from_home(Path("/test/home"))

        return CgrContext(
            paths=paths,
            catalog=catalog,
            managers=managers,
            custom_store=custom_store,
            settings_store=settings_store,
            prober=prober,
        )


def create_context(home: Path | None = None) -> CgrContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        home: Home directory holding the cgr files. If None, Path.home().

    Returns:
        CgrContext with real stores, package manager adapters and prober
    """
    paths = CgrPaths.from_home(home if home is not None else Path.home())

    return CgrContext(
        paths=paths,
        catalog=load_builtin_catalog(),
        managers={name: RealPackageManager(name) for name in MANAGER_ORDER},
        custom_store=RealRegistryStore(paths.custom_registries),
        settings_store=RealSettingsStore(paths.settings),
        prober=RealLatencyProber(),
    )
