"""Tests for the add command."""

from click.testing import CliRunner

from cgr.cli.cli import cli
from cgr.core.context import CgrContext
from cgr.core.custom_store import FakeRegistryStore
from cgr.core.registries import RegistryEntry


def test_add_stores_registry_with_trailing_slash() -> None:
    runner = CliRunner()
    custom = FakeRegistryStore()
    ctx = CgrContext.for_test(custom_store=custom)

    result = runner.invoke(cli, ["add", "foo", "http://x.test"], obj=ctx)

    assert result.exit_code == 0
    assert "add registry foo success" in result.output
    assert custom.load()["foo"] == RegistryEntry(name="foo", url="http://x.test/", home=None)


def test_add_keeps_single_trailing_slash() -> None:
    runner = CliRunner()
    custom = FakeRegistryStore()
    ctx = CgrContext.for_test(custom_store=custom)

    runner.invoke(cli, ["add", "foo", "http://x.test/"], obj=ctx)

    assert custom.load()["foo"].url == "http://x.test/"


def test_add_records_home() -> None:
    runner = CliRunner()
    custom = FakeRegistryStore()
    ctx = CgrContext.for_test(custom_store=custom)

    runner.invoke(cli, ["add", "foo", "http://x.test", "http://x.test/home"], obj=ctx)

    assert custom.load()["foo"].home == "http://x.test/home"


def test_add_rejects_existing_custom_name() -> None:
    runner = CliRunner()
    custom = FakeRegistryStore({"foo": RegistryEntry.create("foo", "http://x.test")})
    ctx = CgrContext.for_test(custom_store=custom)

    result = runner.invoke(cli, ["add", "foo", "http://y.test"], obj=ctx)

    assert result.exit_code == 0
    assert "Registry 'foo' already exists" in result.output
    assert custom.load()["foo"].url == "http://x.test/"
    assert custom.save_count == 0


def test_add_rejects_builtin_name() -> None:
    runner = CliRunner()
    custom = FakeRegistryStore()
    ctx = CgrContext.for_test(custom_store=custom)

    result = runner.invoke(cli, ["add", "npm", "http://y.test"], obj=ctx)

    assert result.exit_code == 0
    assert "Registry 'npm' already exists" in result.output
    assert custom.load() == {}


def test_add_write_failure_exits_with_error() -> None:
    runner = CliRunner()
    custom = FakeRegistryStore(save_error="Permission denied")
    ctx = CgrContext.for_test(custom_store=custom)

    result = runner.invoke(cli, ["add", "foo", "http://x.test"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "Permission denied" in result.output


def test_add_then_del_restores_registry_names() -> None:
    runner = CliRunner()
    ctx = CgrContext.for_test()
    before = set(ctx.effective_catalog())

    runner.invoke(cli, ["add", "foo", "http://x.test"], obj=ctx)
    assert "foo" in ctx.effective_catalog()
    runner.invoke(cli, ["del", "foo"], obj=ctx)

    assert set(ctx.effective_catalog()) == before
