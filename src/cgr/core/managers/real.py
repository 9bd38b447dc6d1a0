"""Production package manager adapter using `<manager> config` subcommands."""

import logging
import shutil

from cgr.core.errors import ManagerQueryError
from cgr.core.managers.abc import PackageManager
from cgr.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealPackageManager(PackageManager):
    """Runs `<exe> config get registry` and `<exe> config set registry <url>`."""

    def __init__(self, name: str, executable: str | None = None) -> None:
        """Create an adapter for one package manager.

        Args:
            name: Canonical manager name
            executable: Program to run. If None, resolved from PATH by name.
        """
        self._name = name
        self._executable = executable

    @property
    def name(self) -> str:
        return self._name

    def _resolve_executable(self) -> str:
        if self._executable is not None:
            return self._executable
        # shutil.which picks up npm.cmd and friends on Windows
        return shutil.which(self._name) or self._name

    def get_registry(self) -> str:
        cmd = [self._resolve_executable(), "config", "get", "registry"]
        logger.debug("Querying registry: %s", " ".join(cmd))
        try:
            result = run_subprocess_with_context(
                cmd, operation_context=f"get {self._name} registry"
            )
        except RuntimeError as e:
            raise ManagerQueryError(self._name, str(e)) from e
        registry = result.stdout.strip()
        logger.debug("%s registry is %s", self._name, registry)
        return registry

    def set_registry(self, url: str) -> None:
        cmd = [self._resolve_executable(), "config", "set", "registry", url]
        logger.debug("Setting registry: %s", " ".join(cmd))
        try:
            run_subprocess_with_context(cmd, operation_context=f"set {self._name} registry")
        except RuntimeError as e:
            raise ManagerQueryError(self._name, str(e)) from e
