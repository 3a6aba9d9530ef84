"""Nox entry point. Sessions are defined in ``pipelines/*.nox.py``."""

from __future__ import annotations

import pathlib
import runpy
import sys

sys.path.append(".")

for f in sorted(pathlib.Path("pipelines").glob("*.nox.py")):
    runpy.run_path(str(f))
