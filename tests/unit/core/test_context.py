"""Unit tests for CgrContext construction and helpers."""

from pathlib import Path

from cgr.core.context import CgrContext, create_context
from cgr.core.custom_store import FakeRegistryStore, RealRegistryStore
from cgr.core.managers import RealPackageManager
from cgr.core.prober import RealLatencyProber
from cgr.core.registries import RegistryEntry
from cgr.core.settings_store import FakeSettingsStore, RealSettingsStore


def test_create_context_uses_home_for_files(tmp_path: Path) -> None:
    ctx = create_context(home=tmp_path)

    assert ctx.paths.custom_registries == tmp_path / ".cgrrc"
    assert ctx.paths.settings == tmp_path / ".cgrcf"
    assert isinstance(ctx.custom_store, RealRegistryStore)
    assert ctx.custom_store.path == tmp_path / ".cgrrc"
    assert isinstance(ctx.settings_store, RealSettingsStore)
    assert isinstance(ctx.prober, RealLatencyProber)
    assert list(ctx.managers) == ["npm", "yarn", "pnpm"]
    assert all(isinstance(m, RealPackageManager) for m in ctx.managers.values())


def test_enabled_managers_excludes_pnpm_by_default() -> None:
    ctx = CgrContext.for_test()

    assert [m.name for m in ctx.enabled_managers()] == ["npm", "yarn"]
    assert ctx.is_manager_enabled("npm")
    assert not ctx.is_manager_enabled("pnpm")


def test_enabled_managers_includes_pnpm_when_toggled() -> None:
    ctx = CgrContext.for_test(settings_store=FakeSettingsStore({"pnpm": True}))

    assert [m.name for m in ctx.enabled_managers()] == ["npm", "yarn", "pnpm"]


def test_effective_catalog_is_recomputed_from_store() -> None:
    custom = FakeRegistryStore()
    ctx = CgrContext.for_test(custom_store=custom)
    assert "foo" not in ctx.effective_catalog()

    custom.save({"foo": RegistryEntry.create("foo", "http://x.test")})

    assert ctx.effective_catalog()["foo"].url == "http://x.test/"
