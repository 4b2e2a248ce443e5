from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("numclass-api")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .classify import ClassificationError, ClassificationResult, classify, evaluate
from .config import Settings, load_settings
from .facts import FactProvider, fallback_fact
from .registry import default_index, discover

__all__ = [
    "ClassificationError",
    "ClassificationResult",
    "FactProvider",
    "Settings",
    "__version__",
    "classify",
    "default_index",
    "discover",
    "evaluate",
    "fallback_fact",
    "load_settings",
]
