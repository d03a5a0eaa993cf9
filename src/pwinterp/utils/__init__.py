"""
utils
=====

Small, *stateless* helper sub-package:

* :pymod:`utils.data` – CSV samples and YAML/JSON config loading

No heavy imports at top-level: ``pandas`` is only pulled in when
``utils.data`` is first touched.
"""

from __future__ import annotations

import importlib
import types

__all__: list[str] = ["data"]


def __getattr__(name: str) -> types.ModuleType:
    if name in __all__:
        mod = importlib.import_module(f"{__name__}.{name}")
        globals()[name] = mod  # memoise – subsequent access is direct
        return mod
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
