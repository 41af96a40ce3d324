# -*- coding: utf-8 -*-
"""Profile tracing and surface-of-revolution meshing."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lathecad")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
