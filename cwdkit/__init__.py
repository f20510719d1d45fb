"""cwdkit package: the process working-directory primitive and the tools that expose it."""

__all__: list[str] = []
