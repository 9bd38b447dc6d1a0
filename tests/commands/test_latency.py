"""Tests for the test (latency) command."""

from click.testing import CliRunner

from cgr.cli.cli import cli
from cgr.core.context import CgrContext
from cgr.core.prober.fake import FakeLatencyProber
from tests.test_utils.env_helpers import TAOBAO_URL, YARN_URL, fake_managers


def test_test_probes_every_registry() -> None:
    runner = CliRunner()
    prober = FakeLatencyProber(timings={"npm": 120, "taobao": 35})
    ctx = CgrContext.for_test(prober=prober)

    result = runner.invoke(cli, ["test"], obj=ctx)

    assert result.exit_code == 0
    assert prober.probe_calls == [list(ctx.catalog)]
    assert "npm ---- 120ms" in result.output
    assert "taobao - 35ms" in result.output


def test_test_single_registry() -> None:
    runner = CliRunner()
    prober = FakeLatencyProber(timings={"taobao": 35})
    ctx = CgrContext.for_test(
        managers=fake_managers(npm=TAOBAO_URL, yarn=YARN_URL), prober=prober
    )

    result = runner.invoke(cli, ["test", "taobao"], obj=ctx)

    assert result.exit_code == 0
    assert prober.probe_calls == [["taobao"]]
    assert "N taobao - 35ms" in result.output
    assert "yarn" not in result.output


def test_test_renders_fetch_error_instead_of_time() -> None:
    runner = CliRunner()
    prober = FakeLatencyProber(timings={"cnpm": 42}, failing={"cnpm"})
    ctx = CgrContext.for_test(prober=prober)

    result = runner.invoke(cli, ["test", "cnpm"], obj=ctx)

    assert result.exit_code == 0
    assert "cnpm --- Fetch Error" in result.output
    assert "42ms" not in result.output


def test_test_unknown_registry_is_reported_without_probing() -> None:
    runner = CliRunner()
    prober = FakeLatencyProber()
    ctx = CgrContext.for_test(prober=prober)

    result = runner.invoke(cli, ["test", "nope"], obj=ctx)

    assert result.exit_code == 0
    assert "Not find registry: nope" in result.output
    assert prober.probe_calls == []


def test_test_marks_registry_used_by_several_managers() -> None:
    runner = CliRunner()
    ctx = CgrContext.for_test(managers=fake_managers(npm=TAOBAO_URL, yarn=TAOBAO_URL))

    result = runner.invoke(cli, ["test"], obj=ctx)

    assert "* taobao - 100ms" in result.output
    assert "  npm ---- 100ms" in result.output
