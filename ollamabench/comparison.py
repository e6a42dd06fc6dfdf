"""Writing a ranked model comparison to a file."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

from .benchmark import BenchmarkResult
from .i18n import _fill, t
from .output import aggregate

_MEDALS = ("🥇", "🥈", "🥉")


def write_comparison(path: str | PathLike[str], results: Iterable[BenchmarkResult]) -> None:
    """Write per-model totals, fastest first, with medals for the top three."""
    ranked = sorted(aggregate(results), key=lambda a: a.token_per_s, reverse=True)
    try:
        fh = open(path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise OSError(_fill(t("err_file_create"), exc)) from exc
    with fh:
        headers = ["header_model", "header_time", "header_tokens", "header_tps", "header_rank"]
        fh.write("\t".join(t(key) for key in headers) + "\n")
        for position, a in enumerate(ranked):
            rank = _MEDALS[position] if position < len(_MEDALS) else "-"
            fh.write(
                f"{a.model}\t{a.avg_duration:.2f}\t{a.total_tokens}\t"
                f"{a.token_per_s:.1f}\t{rank}\n"
            )