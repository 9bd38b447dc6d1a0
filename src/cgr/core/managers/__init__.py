from cgr.core.managers.abc import PackageManager
from cgr.core.managers.real import RealPackageManager
from cgr.core.managers.types import (
    MANAGER_MARKERS,
    MANAGER_ORDER,
    OPTIONAL_MANAGERS,
    parse_manager_selector,
)

__all__ = [
    "MANAGER_MARKERS",
    "MANAGER_ORDER",
    "OPTIONAL_MANAGERS",
    "PackageManager",
    "RealPackageManager",
    "parse_manager_selector",
]
