#!/usr/bin/env python
"""Exhaustively check the interval relation laws over small domains."""

import itertools
import json
import random
from collections import Counter
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import typer

from rangecomp.dispatch import ALLEN_RELATIONS, query, relations_between
from rangecomp.models import Interval
from rangecomp.notation import format_interval
from rangecomp.relations import disjoint, intersects
from rangecomp.sampling import (
    is_non_degenerate,
    iter_intervals,
    sample_interval,
)

app = typer.Typer(help="Check partition and symmetry of interval relations.")

RECIPROCALS = (
    ("before", "after"),
    ("meets", "metby"),
    ("overlaps", "overlappedby"),
    ("starts", "startedby"),
    ("during", "contains"),
    ("finishes", "finishedby"),
)
MAX_REPORTED_FAILURES = 20


def _pair_label(left: Interval, right: Interval) -> str:
    return f"{format_interval(left)} vs {format_interval(right)}"


def _check_pair(left: Interval, right: Interval) -> list[str]:
    failures: list[str] = []
    held = relations_between(left, right)
    if len(held) != 1:
        names = ", ".join(relation.value for relation in held) or "none"
        failures.append(f"partition: {_pair_label(left, right)} -> {names}")
    for name, reciprocal in RECIPROCALS:
        if query(left, right, name) != query(right, left, reciprocal):
            failures.append(
                f"symmetry {name}/{reciprocal}: {_pair_label(left, right)}"
            )
    if disjoint(left, right) == intersects(left, right):
        failures.append(f"duality: {_pair_label(left, right)}")
    return failures


def _check_pairs(
    pairs: Iterable[tuple[Interval, Interval]],
) -> dict[str, Any]:
    counts: Counter[str] = Counter()
    failures: list[str] = []
    pair_count = 0
    for left, right in pairs:
        pair_count += 1
        failures.extend(_check_pair(left, right))
        for relation in relations_between(left, right):
            counts[relation.value] += 1
    return {
        "pairs": pair_count,
        "relation_counts": {
            relation.value: counts.get(relation.value, 0)
            for relation in ALLEN_RELATIONS
        },
        "failure_count": len(failures),
        "failures": failures[:MAX_REPORTED_FAILURES],
    }


@app.command()
def main(
    output: Path = typer.Option(
        Path("artifacts/relations_check.json"),
        "--output",
        "-o",
        help="Path for JSON report",
    ),
    max_value: int = typer.Option(
        4,
        "--max-value",
        min=1,
        help="Exhaustive check uses endpoints 0..max-value",
    ),
    samples: int = typer.Option(
        500,
        "--samples",
        "-n",
        min=0,
        help="Random interval pairs drawn from -50..50",
    ),
    seed: int = typer.Option(42, help="Random seed"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit non-zero if any law is violated",
    ),
) -> None:
    """Check partition, reciprocal symmetry and duality; write a report."""
    exhaustive = [
        interval
        for interval in iter_intervals(range(max_value + 1))
        if is_non_degenerate(interval)
    ]
    rng = random.Random(seed)
    sampled = [
        (sample_interval((-50, 50), rng), sample_interval((-50, 50), rng))
        for _ in range(samples)
    ]

    report = {
        "max_value": max_value,
        "seed": seed,
        "exhaustive": _check_pairs(itertools.product(exhaustive, repeat=2)),
        "sampled": _check_pairs(sampled),
    }

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n")
    typer.echo(f"Wrote relations report to {output}")

    total_failures = 0
    for name in ("exhaustive", "sampled"):
        section = report[name]
        total_failures += section["failure_count"]
        typer.echo(
            f"{name}: pairs={section['pairs']} "
            f"failures={section['failure_count']}"
        )
        for failure in section["failures"]:
            typer.echo(f"  - {failure}")

    if strict and total_failures:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
