"""Developer tooling: git hook installation and tool bootstrap."""
