"""HTTP adapter exposing the checkers engine to an external board renderer."""

from __future__ import annotations

from importlib import import_module

__all__ = ["app", "create_app", "GameSession"]

_LAZY_EXPORTS = {
    "app": ".app",
    "create_app": ".app",
    "GameSession": ".session",
}


def __getattr__(name: str):
    # FastAPI is only imported once the app itself is requested.
    module_name = _LAZY_EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(name)
    return getattr(import_module(module_name, __name__), name)
