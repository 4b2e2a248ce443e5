# src/numclass_api/registry.py
from __future__ import annotations

import inspect
import logging
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import import_module
from importlib.resources import as_file
from importlib.resources import files as pkg_files
from pathlib import Path

from numclass_api.utility import _token

logger = logging.getLogger(__name__)


# --------------------- Discovery → Index (immutable) ----------------------


@dataclass
class Index:
    funcs: dict[str, Callable]                 # label -> func
    categories: dict[str, str]                 # label -> category
    descriptions: dict[str, str]               # label -> short description
    oeis: dict[str, str | None]                # label -> A-code or None
    label_to_token: dict[str, str]             # label -> TOKEN
    tags: dict[str, str] = field(default_factory=dict)     # label -> property tag
    limits: dict[str, int] = field(default_factory=dict)   # label -> max |n|
    failed: list[tuple[str, str]] = field(default_factory=list)  # (module, error)


def _is_classifier(obj) -> bool:
    return callable(obj) and getattr(obj, "__is_classifier__", False)


def _collect_from_module(mod) -> list[Callable[[int], object]]:
    # keep source order so property tags come out in a stable order
    found = [o for _, o in inspect.getmembers(mod) if _is_classifier(o)]
    return sorted(found, key=lambda fn: fn.__code__.co_firstlineno)


# ---------- Decorator (only tags the function; no side effects) ----------


def classifier(*, label: str, category: str, description: str = "",
               oeis: str | None = None, tag: str | None = None,
               limit: int | None = None):
    def deco(fn: Callable[[int], object]):
        fn.__is_classifier__ = True
        fn.label = label
        fn.category = category
        fn.description = description
        fn.oeis = oeis
        if tag is not None:
            fn.tag = tag
        if limit is not None:
            fn.limit = int(limit)
        return fn
    return deco


def _module_names() -> list[str]:
    pkg_dir = pkg_files("numclass_api") / "classifiers"
    with as_file(pkg_dir) as real:
        return [
            f"numclass_api.classifiers.{file.stem}"
            for file in sorted(Path(real).glob("*.py"))
            if file.name != "__init__.py"
        ]


def discover(modules: list[str] | None = None) -> Index:
    """Discover packaged classifiers; the first module to claim a label keeps it."""
    funcs: OrderedDict[str, Callable[[int], object]] = OrderedDict()
    cats: dict[str, str] = {}
    desc: dict[str, str] = {}
    toks: dict[str, str] = {}
    refs: dict[str, str | None] = {}
    tags: dict[str, str] = {}
    limits: dict[str, int] = {}
    failed: list[tuple[str, str]] = []

    for modname in (modules if modules is not None else _module_names()):
        try:
            mod = import_module(modname)
        except Exception as e:
            # Skip broken module; don't crash the app
            logger.error("Cannot import classifier module %s: %s", modname, e)
            failed.append((modname, f"{type(e).__name__}: {e}"))
            continue
        for fn in _collect_from_module(mod):
            label = fn.label
            if label in funcs:
                logger.warning("Duplicate classifier label %r in %s skipped", label, modname)
                continue
            funcs[label] = fn
            cats[label] = getattr(fn, "category", "General")
            desc[label] = getattr(fn, "description", "")
            toks[label] = _token(label)
            refs[label] = getattr(fn, "oeis", None)
            tag = getattr(fn, "tag", None)
            if isinstance(tag, str):
                tags[label] = tag
            lim = getattr(fn, "limit", None)
            if isinstance(lim, int):
                limits[label] = lim

    logger.debug("Discovered %d classifier(s)", len(funcs))
    return Index(
        funcs=funcs,
        categories=cats,
        descriptions=desc,
        oeis=refs,
        label_to_token=toks,
        tags=tags,
        limits=limits,
        failed=failed,
    )


@lru_cache(maxsize=1)
def default_index() -> Index:
    """Process-wide index; built once and only read afterwards."""
    return discover()
