"""Registry entries and the built-in catalog.

The built-in catalog ships as package data (``cgr/data/registries.yaml``) and is
read-only at runtime. The effective catalog is the built-in one overlaid with
the user's custom registries and is recomputed on every invocation.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

from cgr.core.errors import RegistryNotFoundError

FALLBACK_REGISTRY = "npm"


@dataclass(frozen=True)
class RegistryEntry:
    """A named registry.

    ``url`` always ends with a single "/"; build entries through
    ``RegistryEntry.create`` to get that normalization.
    """

    name: str
    url: str
    home: str | None = None

    @staticmethod
    def create(name: str, url: str, home: str | None = None) -> "RegistryEntry":
        return RegistryEntry(name=name, url=normalize_registry_url(url), home=home or None)


def normalize_registry_url(url: str) -> str:
    """Trim whitespace and make sure the URL ends with exactly one "/".

    Examples:
        >>> normalize_registry_url("http://x.test")
        'http://x.test/'
        >>> normalize_registry_url("http://x.test//")
        'http://x.test/'
    """
    return url.strip().rstrip("/") + "/"


def builtin_catalog_path() -> Path:
    return Path(__file__).parent.parent / "data" / "registries.yaml"


def load_builtin_catalog(path: Path | None = None) -> dict[str, RegistryEntry]:
    """Load the built-in registries in file order.

    Args:
        path: Catalog file (defaults to the packaged registries.yaml)

    Returns:
        Ordered mapping of name to entry

    Raises:
        ValueError: If an entry is missing its name or registry URL
    """
    catalog_path = path if path is not None else builtin_catalog_path()

    with open(catalog_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or "registries" not in data:
        return {}

    catalog: dict[str, RegistryEntry] = {}
    for item in data["registries"]:
        name = item.get("name")
        url = item.get("registry")
        if not name or not url:
            raise ValueError(f"Catalog entry missing 'name' or 'registry' in {catalog_path}")
        catalog[str(name)] = RegistryEntry.create(str(name), str(url), item.get("home"))
    return catalog


def merge_catalogs(
    builtin: Mapping[str, RegistryEntry],
    custom: Mapping[str, RegistryEntry],
) -> dict[str, RegistryEntry]:
    """Overlay custom registries on the built-in catalog.

    Built-in entries keep their position; a custom entry with the same name
    replaces the built-in value in place. Remaining custom entries follow in
    their stored order.
    """
    merged = dict(builtin)
    merged.update(custom)
    return merged


def lookup_registry(catalog: Mapping[str, RegistryEntry], name: str) -> RegistryEntry:
    """Return the entry called name.

    Raises:
        RegistryNotFoundError: If name is not in catalog
    """
    entry = catalog.get(name)
    if entry is None:
        raise RegistryNotFoundError(name)
    return entry
