"""Auto-discovery of built-in Strategy subclasses.

Every module in this package is imported and scanned. Interactive
strategies (those reading from a prompt) are skipped unless asked for.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from pathlib import Path

from ..strategy import Strategy

_PKG_DIR = Path(__file__).resolve().parent


def _subclasses_in_module(mod) -> list[type[Strategy]]:
    found: list[type[Strategy]] = []
    for attr_name in dir(mod):
        obj = getattr(mod, attr_name)
        if (
            isinstance(obj, type)
            and issubclass(obj, Strategy)
            and obj is not Strategy
            and not inspect.isabstract(obj)
            # Skip names imported from sibling modules
            and obj.__module__ == mod.__name__
        ):
            found.append(obj)
    return found


def discover_strategies(include_interactive: bool = False) -> list[type[Strategy]]:
    """Return the Strategy subclasses defined in this package."""
    found: list[type[Strategy]] = []
    for info in pkgutil.iter_modules([str(_PKG_DIR)]):
        mod = importlib.import_module(f"{__name__}.{info.name}")
        found.extend(
            cls for cls in _subclasses_in_module(mod)
            if include_interactive or not cls.interactive
        )
    return found


def find_strategy(name: str) -> type[Strategy]:
    """Return the non-interactive strategy class whose ``name`` is *name*.

    Raises KeyError listing the available names if there is none.
    """
    classes = discover_strategies()
    for cls in classes:
        if cls().name.lower() == name.lower():
            return cls
    available = sorted(cls().name for cls in classes)
    raise KeyError(f"strategy {name!r} not found, available: {available}")
