"""Appending per-model performance summaries to a log file."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from os import PathLike

from .benchmark import BenchmarkResult
from .i18n import _fill, t
from .output import aggregate

DEFAULT_LOG_PATH = "benchmark.log"


def _rfc3339_now() -> str:
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    return stamp[:-6] + "Z" if stamp.endswith("+00:00") else stamp


def append_performance_log(
    results: Iterable[BenchmarkResult], path: str | PathLike[str] = DEFAULT_LOG_PATH
) -> None:
    """Append one timestamped summary line per model to the log at *path*."""
    try:
        fh = open(path, "a", encoding="utf-8", newline="")
    except OSError as exc:
        raise OSError(_fill(t("err_file_log"), exc)) from exc
    with fh:
        for a in aggregate(results):
            fh.write(
                f"[{_rfc3339_now()}] "
                f"{t('header_model')}: {a.model} | "
                f"{t('header_time')}: {a.avg_duration:.2f}s | "
                f"{t('header_tokens')}: {a.total_tokens} | "
                f"{t('header_tps')}: {a.token_per_s:.2f}\n"
            )