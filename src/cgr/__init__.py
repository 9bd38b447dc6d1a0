"""Switch, list and test package registries for npm, yarn and pnpm."""
