from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from numclass_api.classifiers.arithmetic_divisor import is_perfect
from numclass_api.classifiers.prime import is_prime
from numclass_api.registry import Index, default_index
from numclass_api.utility import digit_sum, parity

logger = logging.getLogger(__name__)


# ---------- Data models -------------------------------------------------------

@dataclass(frozen=True)
class ClassificationResult:
    number: int
    is_prime: bool
    is_perfect: bool
    properties: tuple[str, ...]      # ["armstrong"?, parity]
    digit_sum: int
    fun_fact: str = ""

    def with_fun_fact(self, text: str) -> ClassificationResult:
        return replace(self, fun_fact=text)

    def as_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "is_prime": self.is_prime,
            "is_perfect": self.is_perfect,
            "properties": list(self.properties),
            "digit_sum": self.digit_sum,
            "fun_fact": self.fun_fact,
        }


@dataclass(frozen=True)
class ClassificationError:
    raw_input: str
    error: bool = True

    def as_dict(self) -> dict[str, Any]:
        return {"number": self.raw_input, "error": self.error}


@dataclass
class Outcome:
    label: str
    category: str
    ok: bool
    detail: str | None
    oeis: str | None


@dataclass
class Evaluation:
    outcomes: list[Outcome] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def positive(self) -> list[Outcome]:
        return [o for o in self.outcomes if o.ok]


# ---------- Helpers -----------------------------------------------------------

def _coerce_result(res: Any) -> tuple[bool, str | None]:
    """Normalize classifier return into (ok, detail)."""
    if isinstance(res, tuple):
        if not res:
            return False, None
        ok, *rest = res
        detail = rest[0] if rest else None
        return bool(ok), detail
    return bool(res), None


def _over_limit(index: Index, label: str, n: int) -> bool:
    lim = index.limits.get(label)
    return lim is not None and abs(n) > lim


def property_tags(n: int, index: Index | None = None) -> tuple[str, ...]:
    """
    Tags of the tagged classifiers that accept n, in registry order, followed
    by the parity tag. Negative n never reaches the tagged digit classifiers.
    """
    index = index or default_index()
    tags: list[str] = []
    if n >= 0:
        for label, tag in index.tags.items():
            fn: Callable | None = index.funcs.get(label)
            if fn is None or _over_limit(index, label, n) or tag in tags:
                continue
            ok, _ = _coerce_result(fn(n))
            if ok:
                tags.append(tag)
    tags.append(parity(n))
    return tuple(tags)


# ---------- Main API ----------------------------------------------------------

def classify(n: int, index: Index | None = None) -> ClassificationResult:
    """
    Classify n. The fun fact is left empty; the caller fills it in with
    ClassificationResult.with_fun_fact().
    """
    n = int(n)
    return ClassificationResult(
        number=n,
        is_prime=is_prime(n),
        is_perfect=is_perfect(n),
        properties=property_tags(n, index),
        digit_sum=digit_sum(n),
    )


def evaluate(n: int, index: Index | None = None) -> Evaluation:
    """
    Run every registered classifier on n and keep its details:
      * per-label limit honored (recorded as skipped)
      * errors recorded to 'skipped'; the run continues
    """
    index = index or default_index()
    result = Evaluation()

    for label, fn in index.funcs.items():
        if _over_limit(index, label, n):
            result.skipped.append(f"{label}: |n| > {index.limits[label]}")
            continue
        try:
            ok, detail = _coerce_result(fn(n))
        except Exception as e:
            logger.warning("Classifier %r failed for %d: %s", label, n, e)
            result.skipped.append(f"{label}: {e}")
            continue
        result.outcomes.append(
            Outcome(label, index.categories.get(label, "Uncategorized"), ok, detail, index.oeis.get(label))
        )

    return result
