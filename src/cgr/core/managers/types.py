"""Names, markers and selector aliases for the supported package managers."""

# Query and display order.
MANAGER_ORDER = ("npm", "yarn", "pnpm")

# Managers that stay off until enabled with `cgr on`.
OPTIONAL_MANAGERS = ("pnpm",)

MANAGER_MARKERS = {"npm": "N", "yarn": "Y", "pnpm": "P"}

_SELECTOR_ALIASES = {
    "npm": "npm",
    "n": "npm",
    "yarn": "yarn",
    "y": "yarn",
    "pnpm": "pnpm",
    "p": "pnpm",
}

SELECTOR_HELP = "yarn | y | npm | n | pnpm | p"


def parse_manager_selector(value: str) -> str | None:
    """Map a user-supplied manager selector to its canonical name.

    Matching is case-insensitive and accepts the one-letter aliases.

    Examples:
        >>> parse_manager_selector("Y")
        'yarn'
        >>> parse_manager_selector("bun") is None
        True
    """
    return _SELECTOR_ALIASES.get(value.strip().lower())
