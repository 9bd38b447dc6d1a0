"""Tests for the on and off commands."""

from pathlib import Path

from click.testing import CliRunner

from cgr.cli.cli import cli
from cgr.core.context import CgrContext
from cgr.core.settings_store import FakeSettingsStore, RealSettingsStore


def test_on_enables_pnpm() -> None:
    runner = CliRunner()
    settings = FakeSettingsStore()
    ctx = CgrContext.for_test(settings_store=settings)

    result = runner.invoke(cli, ["on", "pnpm"], obj=ctx)

    assert result.exit_code == 0
    assert "cgr enable pnpm success" in result.output
    assert settings.load() == {"pnpm": True}
    assert [m.name for m in ctx.enabled_managers()] == ["npm", "yarn", "pnpm"]


def test_on_defaults_to_pnpm_and_accepts_alias() -> None:
    runner = CliRunner()
    settings = FakeSettingsStore()
    ctx = CgrContext.for_test(settings_store=settings)

    assert runner.invoke(cli, ["on"], obj=ctx).exit_code == 0
    assert settings.load() == {"pnpm": True}

    assert runner.invoke(cli, ["off", "P"], obj=ctx).exit_code == 0
    assert settings.load() == {}


def test_on_when_already_enabled_does_not_rewrite() -> None:
    runner = CliRunner()
    settings = FakeSettingsStore({"pnpm": True})
    ctx = CgrContext.for_test(settings_store=settings)

    result = runner.invoke(cli, ["on", "pnpm"], obj=ctx)

    assert result.exit_code == 0
    assert "already enabled" in result.output
    assert settings.save_count == 0


def test_off_disables_pnpm() -> None:
    runner = CliRunner()
    settings = FakeSettingsStore({"pnpm": True})
    ctx = CgrContext.for_test(settings_store=settings)

    result = runner.invoke(cli, ["off", "pnpm"], obj=ctx)

    assert result.exit_code == 0
    assert "cgr disable pnpm success" in result.output
    assert settings.load() == {}
    assert [m.name for m in ctx.enabled_managers()] == ["npm", "yarn"]


def test_off_when_already_disabled_does_not_rewrite() -> None:
    runner = CliRunner()
    settings = FakeSettingsStore()
    ctx = CgrContext.for_test(settings_store=settings)

    result = runner.invoke(cli, ["off"], obj=ctx)

    assert result.exit_code == 0
    assert "already disabled" in result.output
    assert settings.save_count == 0


def test_on_required_manager_is_always_enabled() -> None:
    runner = CliRunner()
    settings = FakeSettingsStore()
    ctx = CgrContext.for_test(settings_store=settings)

    result = runner.invoke(cli, ["off", "npm"], obj=ctx)

    assert result.exit_code == 0
    assert "npm is always enabled" in result.output
    assert settings.save_count == 0


def test_on_unknown_type_is_reported() -> None:
    runner = CliRunner()
    settings = FakeSettingsStore()
    ctx = CgrContext.for_test(settings_store=settings)

    result = runner.invoke(cli, ["on", "bun"], obj=ctx)

    assert result.exit_code == 0
    assert "Unknown type: bun" in result.output
    assert settings.save_count == 0


def test_on_write_failure_exits_with_error() -> None:
    runner = CliRunner()
    ctx = CgrContext.for_test(settings_store=FakeSettingsStore(save_error="read-only"))

    result = runner.invoke(cli, ["on", "pnpm"], obj=ctx)

    assert result.exit_code == 1
    assert "read-only" in result.output


def test_on_with_non_boolean_settings_file_exits_with_error(tmp_path: Path) -> None:
    runner = CliRunner()
    path = tmp_path / ".cgrcf"
    path.write_text('{"pnpm": "false"}', encoding="utf-8")
    ctx = CgrContext.for_test(settings_store=RealSettingsStore(path))

    result = runner.invoke(cli, ["on", "pnpm"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Setting 'pnpm'" in result.output
    assert path.read_text(encoding="utf-8") == '{"pnpm": "false"}'
