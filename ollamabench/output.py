"""Aggregating benchmark results and presenting them on screen and on disk."""

from __future__ import annotations

import csv
import json
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .benchmark import BenchmarkResult
from .i18n import t

_MEDALS = ("🥇", "🥈", "🥉")
_CSV_HEADERS = ["model", "prompt", "trial", "duration_s", "tokens", "token_per_s"]


@dataclass(frozen=True)
class AggregatedResult:
    """Per-model totals; *avg_duration* is in seconds."""

    model: str
    avg_duration: float
    total_tokens: int
    token_per_s: float


def group_by_model(results: Iterable[BenchmarkResult]) -> dict[str, list[BenchmarkResult]]:
    """Group results by model name, keeping the order models first appear."""
    groups: dict[str, list[BenchmarkResult]] = {}
    for result in results:
        groups.setdefault(result.model, []).append(result)
    return groups


def aggregate(results: Iterable[BenchmarkResult]) -> list[AggregatedResult]:
    """Summarise results per model: mean duration, total tokens, overall rate."""
    aggregated = []
    for model, group in group_by_model(results).items():
        total_time = sum(r.duration for r in group)
        total_tokens = sum(r.tokens for r in group)
        if total_time > 0:
            rate = total_tokens / total_time
        else:
            rate = math.inf if total_tokens else math.nan
        aggregated.append(
            AggregatedResult(
                model=model,
                avg_duration=total_time / len(group),
                total_tokens=total_tokens,
                token_per_s=rate,
            )
        )
    return aggregated


def _by_speed(results: Iterable[BenchmarkResult]) -> list[AggregatedResult]:
    return sorted(aggregate(results), key=lambda a: a.token_per_s, reverse=True)


def _summary_cells(a: AggregatedResult) -> list[str]:
    return [a.model, f"{a.avg_duration:.2f}", str(a.total_tokens), f"{a.token_per_s:.1f}"]


def _headers() -> list[str]:
    return [t("header_model"), t("header_time"), t("header_tokens"), t("header_tps")]


def _rank(position: int) -> str:
    return _MEDALS[position] if position < len(_MEDALS) else "-"


def _align(rows: list[list[str]], padding: int = 2) -> list[str]:
    """Pad every cell but the last of each row to its column's width."""
    widths = [max(map(len, column)) for column in zip(*rows)][:-1]
    return [
        "".join(cell.ljust(width + padding) for cell, width in zip(row, widths)) + row[-1]
        for row in rows
    ]


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _detail_lines(results: Iterable[BenchmarkResult]) -> Iterator[str]:
    for r in results:
        yield f"[{r.model}] Trial {r.trial} | {t('field_prompt')}: {_quote(r.prompt)}"
        yield (
            f"  ➜ {t('field_tokens')}: {r.tokens} | "
            f"{t('field_time')}: {r.duration:.2f}s | "
            f"{t('field_tps')}: {r.token_per_s:.2f}"
        )
        yield ""


def _ensure_parent(path: str | PathLike[str]) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def format_as_table(results: Iterable[BenchmarkResult], tokens_only: bool) -> None:
    """Print an aligned per-model summary, fastest first.

    *tokens_only* is accepted for interface symmetry and does not change the table.
    """
    rows = [_headers()] + [_summary_cells(a) for a in _by_speed(results)]
    for line in _align(rows):
        print(line)


def print_details(results: Iterable[BenchmarkResult]) -> None:
    """Print every individual trial."""
    print("\n" + t("details_title"))
    for line in _detail_lines(results):
        print(line)


def write_json(path: str | PathLike[str], results: Iterable[BenchmarkResult]) -> None:
    """Write the raw results as an indented JSON array; durations in nanoseconds."""
    records = [
        {
            "Model": r.model,
            "Prompt": r.prompt,
            "Trial": r.trial,
            "Tokens": r.tokens,
            "Duration": round(r.duration * 1e9),
            "TokenPerS": r.token_per_s,
        }
        for r in results
    ]
    text = json.dumps(records, indent=2, ensure_ascii=False, allow_nan=False)
    _ensure_parent(path).write_text(text, encoding="utf-8")


def write_csv(path: str | PathLike[str], results: Iterable[BenchmarkResult]) -> None:
    """Write the raw results as CSV with a header row."""
    target = _ensure_parent(path)
    with target.open("w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(_CSV_HEADERS)
        writer.writerows(
            [
                r.model,
                r.prompt,
                str(r.trial),
                f"{r.duration:.2f}",
                str(r.tokens),
                f"{r.token_per_s:.1f}",
            ]
            for r in results
        )


def write_txt(
    path: str | PathLike[str], results: Iterable[BenchmarkResult], tokens_only: bool
) -> None:
    """Write a per-model summary followed by every trial to a text file.

    *tokens_only* is accepted for interface symmetry and does not change the file.
    """
    results = list(results)
    target = _ensure_parent(path)
    with target.open("w", encoding="utf-8", newline="") as fh:
        fh.write(t("summary_title") + "\n")
        fh.write("\t".join(_headers()) + "\n")
        for a in aggregate(results):
            fh.write("\t".join(_summary_cells(a)) + "\n")
        fh.write("\n" + t("details_title") + "\n")
        for line in _detail_lines(results):
            fh.write(line + "\n")


def show_comparison(results: Iterable[BenchmarkResult]) -> None:
    """Print a ranked per-model comparison, fastest first."""
    print()
    print(t("comparison_title"))
    print()
    print("\t".join(_headers() + [t("header_rank")]))
    for position, a in enumerate(_by_speed(results)):
        print("\t".join(_summary_cells(a) + [_rank(position)]))