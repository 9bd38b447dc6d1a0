"""Locations of the files cgr reads and writes."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CgrPaths:
    """File locations, resolved once at CLI entry point.

    custom_registries holds the user's added registries (TOML).
    settings records which optional package managers are enabled (JSON).
    """

    home: Path
    custom_registries: Path
    settings: Path

    @staticmethod
    def from_home(home: Path) -> "CgrPaths":
        return CgrPaths(
            home=home,
            custom_registries=home / ".cgrrc",
            settings=home / ".cgrcf",
        )
