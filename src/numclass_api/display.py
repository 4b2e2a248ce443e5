# src/numclass_api/display.py
from __future__ import annotations

import json
import sys
from typing import TextIO

from colorama import Fore, Style

from numclass_api.classify import ClassificationResult, Evaluation
from numclass_api.registry import Index


def _yes_no(flag: bool) -> str:
    if flag:
        return f"{Fore.GREEN}{Style.BRIGHT}yes{Style.RESET_ALL}"
    return f"{Style.DIM}no{Style.RESET_ALL}"


def print_json(result: ClassificationResult, out: TextIO = sys.stdout) -> None:
    print(json.dumps(result.as_dict(), ensure_ascii=False, indent=2), file=out)


def print_classification(
    result: ClassificationResult,
    evaluation: Evaluation | None = None,
    show_details: bool = True,
    out: TextIO = sys.stdout,
) -> None:
    """Human-readable report: the API fields, then every matching classifier with its detail."""
    print(f"\n{Fore.YELLOW}{Style.BRIGHT}Number {result.number}{Style.RESET_ALL}", file=out)
    print(f"  Prime:       {_yes_no(result.is_prime)}", file=out)
    print(f"  Perfect:     {_yes_no(result.is_perfect)}", file=out)
    print(f"  Properties:  {', '.join(result.properties)}", file=out)
    print(f"  Digit sum:   {result.digit_sum}", file=out)
    if result.fun_fact:
        print(f"  Fun fact:    {result.fun_fact}", file=out)

    if evaluation is None:
        return

    matched = evaluation.positive
    if matched:
        print(f"\n{Fore.YELLOW}{Style.BRIGHT}Classifications{Style.RESET_ALL}", file=out)
    for o in matched:
        ref = f" {Style.DIM}({o.oeis}){Style.RESET_ALL}" if o.oeis else ""
        print(f"  {Fore.GREEN}✔{Style.RESET_ALL} {o.label}{ref}", file=out)
        if show_details and o.detail:
            print(f"      {Style.DIM}{o.detail}{Style.RESET_ALL}", file=out)
    for msg in evaluation.skipped:
        print(f"  {Fore.YELLOW}SKIP{Style.RESET_ALL} {msg}", file=out)


def show_classifier_list(index: Index, out: TextIO = sys.stdout) -> None:
    """List discovered classifiers grouped by category."""
    by_cat: dict[str, list[str]] = {}
    for label in index.funcs:
        by_cat.setdefault(index.categories.get(label, "Uncategorized"), []).append(label)

    for cat in sorted(by_cat, key=str.casefold):
        print(f"{Fore.YELLOW}{Style.BRIGHT}{cat}{Style.RESET_ALL}", file=out)
        for label in by_cat[cat]:
            extras = [x for x in (index.oeis.get(label), index.tags.get(label)) if x]
            suffix = f" {Style.DIM}[{', '.join(extras)}]{Style.RESET_ALL}" if extras else ""
            print(f"  {label}{suffix}: {index.descriptions.get(label, '')}", file=out)
    for name, err in index.failed:
        print(f"{Fore.RED}FAIL{Style.RESET_ALL} {name}: {err}", file=out)
