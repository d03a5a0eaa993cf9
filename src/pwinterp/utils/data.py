"""
utils.data
==========

Thin I/O layer – keeps *all* file access in one place so the interpolation
core stays completely file-system agnostic.

Functions
---------

load_samples(path)   -> dict[str, ndarray]
    CSV ↦ knot / sample arrays (``t``, ``u`` and, when present, ``du``, ``ddu``).

load_yaml(path)      -> Any
    Load a YAML/JSON configuration file and return the parsed object.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import numpy as np
import pandas as pd
import yaml

from ..errors import ConstructionError

__all__ = ["load_samples", "load_yaml"]

_REQUIRED = ("t", "u")
_OPTIONAL = ("du", "ddu")


# --------------------------------------------------------------------------- #
# Samples loader
# --------------------------------------------------------------------------- #


def load_samples(path: str | Path) -> Dict[str, np.ndarray]:
    """
    Load knot samples from CSV.

    Expected columns: ``t,u`` plus optional ``du,ddu`` – anything else is
    ignored.  Rows are sorted by ``t``; ordering problems beyond that (e.g.
    duplicate knots) are left to the interpolation constructor.
    """
    df = pd.read_csv(path)
    missing = [c for c in _REQUIRED if c not in df.columns]
    if missing:
        raise ConstructionError(f"{path}: missing column(s) {missing}")

    cols = [c for c in (*_REQUIRED, *_OPTIONAL) if c in df.columns]
    df = df.loc[:, cols].dropna().sort_values("t").astype("float64")
    return {c: df[c].to_numpy() for c in cols}


# --------------------------------------------------------------------------- #
# Lightweight YAML/JSON loader
# --------------------------------------------------------------------------- #


def load_yaml(path: str | Path) -> Any:
    """Parse a YAML or JSON file and return the deserialised object."""
    p = Path(path).expanduser().resolve()
    with p.open("r", encoding="utf-8") as fh:
        if p.suffix.lower() == ".json":
            return json.load(fh)
        return yaml.safe_load(fh)
