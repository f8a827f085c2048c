"""Application package initializer.

Exposes the installed distribution version as `__version__`.
"""
from importlib.metadata import PackageNotFoundError, version

try:  # Resolves once installed; running from a checkout falls back.
    __version__ = version("static-demo-server")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
