"""Exceptions raised by figkit."""
from __future__ import annotations

import importlib.util


class MissingDependencyError(ImportError):
    """Raised when an optional third-party package needed for an export is absent."""

    def __init__(self, package: str, module: str) -> None:
        self.package = package
        super().__init__(
            f"{module!r} could not be imported; install it with: pip install {package}",
            name=module,
        )


def require_module(module: str, package: str) -> None:
    """Raise :class:`MissingDependencyError` unless ``module`` is importable."""

    if importlib.util.find_spec(module) is None:
        raise MissingDependencyError(package, module)
