"""Interactive command that benchmarks the models offered by a server."""

from __future__ import annotations

import argparse
import contextlib
import sys
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import TextIO

from . import i18n
from .benchmark import BenchmarkError, BenchmarkResult, run_benchmark
from .client import ApiError, get_model_list
from .comparison import write_comparison
from .i18n import _fill, t
from .logs import append_performance_log
from .output import (
    format_as_table,
    group_by_model,
    print_details,
    show_comparison,
    write_csv,
    write_json,
    write_txt,
)
from .prompt import PromptFileError, read_prompts

BASE_OLLAMA_URL = "http://localhost:11434"
DEFAULT_PROMPT_FILE = "prompts.txt"
DEFAULT_TRIALS = 3
FORMATS = ("csv", "json", "txt")


def _ask(reader: TextIO, text: str) -> str:
    """Show *text* without a newline and return the next stripped input line."""
    print(text, end="", flush=True)
    return reader.readline().strip()


def _load_prompts(path: str) -> list[str]:
    try:
        return read_prompts(path)
    except PromptFileError:
        return []


def _load_models(api_url: str) -> list[str]:
    try:
        return get_model_list(api_url)
    except ApiError:
        return []


def main(argv: Sequence[str] | None = None) -> None:
    """Ask for a language and a mode, then run the chosen benchmark."""
    parser = argparse.ArgumentParser(
        prog="ollamabench", description="Benchmark the models offered by a server."
    )
    parser.add_argument(
        "--lang-file",
        default=i18n.DEFAULT_LANG_PATH,
        help="JSON file holding the message tables",
    )
    args = parser.parse_args(argv)
    reader = sys.stdin

    print("🌍 Language / Dil seçin:")
    print("1) English")
    print("2) Türkçe")
    lang = "tr" if _ask(reader, "👉 : ") == "2" else "en"
    try:
        i18n.load(lang, args.lang_file)
    except (OSError, ValueError) as exc:
        print("⚠️ Language file error:", exc)
        return

    print(t("menu_title"))
    print(t("menu_quick"))
    print(t("menu_settings"))
    choice = _ask(reader, t("prompt_choose_option") + " ")

    if choice == "1":
        run_quick_start(reader)
    elif choice == "2":
        run_with_settings(reader)
    else:
        print(t("msg_invalid_choice"))


def run_quick_start(reader: TextIO) -> None:
    """Benchmark every model once per prompt with default settings."""
    api_url = _ask(reader, f"{t('prompt_api_url')} (default: {BASE_OLLAMA_URL}): ")
    if not api_url:
        api_url = BASE_OLLAMA_URL

    for key in (
        "quick_prompt_path",
        "quick_trials",
        "quick_mode",
        "quick_output",
        "quick_log",
        "quick_starting",
    ):
        print(t(key))

    prompts = _load_prompts(DEFAULT_PROMPT_FILE)
    models = _load_models(api_url)
    results = run_all_models(api_url, models, prompts, 1)
    handle_results(results, "txt", True, False)


def run_with_settings(reader: TextIO) -> None:
    """Ask for every setting, then benchmark one model or all of them."""
    api_url = _ask(reader, t("prompt_api_url") + ": ")

    prompt_file = _ask(reader, f"{t('prompt_prompt_file')} (default: {DEFAULT_PROMPT_FILE}): ")
    if not prompt_file:
        prompt_file = DEFAULT_PROMPT_FILE

    trials = DEFAULT_TRIALS
    trials_text = _ask(reader, f"{t('prompt_trials')} (default: {DEFAULT_TRIALS}): ")
    if trials_text:
        with contextlib.suppress(ValueError):
            trials = int(trials_text)

    out_format = _ask(reader, t("prompt_output_format") + " (csv/json/txt): ")
    if out_format not in FORMATS:
        print(t("msg_invalid_format"))
        return

    tokens_only = _ask(reader, t("prompt_tokens_only") + " ").lower() in ("e", "y")

    prompts = _load_prompts(prompt_file)
    print(t("msg_loading_models"))
    models = _load_models(api_url)

    for number, model in enumerate(models, start=1):
        print(f"{number}) {model}")
    if len(models) > 1:
        print(f"{len(models) + 1}) {t('prompt_all_models')}")

    try:
        choice = int(_ask(reader, t("prompt_model_selection") + ": "))
    except ValueError:
        choice = 0

    if 0 < choice <= len(models):
        try:
            results = run_benchmark(api_url, models[choice - 1], prompts, trials)
        except BenchmarkError:
            results = []
        handle_results(results, out_format, False, tokens_only)
    elif choice == len(models) + 1:
        results = run_all_models(api_url, models, prompts, trials)
        handle_results(results, out_format, True, tokens_only)
    else:
        print(t("msg_invalid_choice"))


def run_all_models(
    api_url: str, models: Iterable[str], prompts: Sequence[str], trials: int
) -> list[BenchmarkResult]:
    """Benchmark each model in turn, reporting and skipping those that fail."""
    results: list[BenchmarkResult] = []
    for model in models:
        try:
            results.extend(run_benchmark(api_url, model, prompts, trials))
        except BenchmarkError as exc:
            print(_fill(t("msg_model_error"), model, exc))
    return results


def handle_results(
    results: Sequence[BenchmarkResult], fmt: str, is_multi_model: bool, tokens_only: bool
) -> None:
    """Show the results and write the detail, summary, comparison and log files."""
    if not results:
        print(t("msg_no_results"))
        return

    format_as_table(results, tokens_only)
    if not is_multi_model:
        print_details(results)

    groups = group_by_model(results)
    for model, group in groups.items():
        with contextlib.suppress(OSError):
            write_txt(
                f"benchmark_detail_{sanitize_filename(model)}_{timestamp()}.txt",
                group,
                False,
            )

    summary_file = f"benchmark_summary_result_{timestamp()}.{fmt}"
    with contextlib.suppress(OSError, ValueError):
        if fmt == "csv":
            write_csv(summary_file, results)
        elif fmt == "json":
            write_json(summary_file, results)
        elif fmt == "txt":
            write_txt(summary_file, results, tokens_only)

    if len(groups) > 1:
        show_comparison(results)
        with contextlib.suppress(OSError):
            write_comparison(f"benchmark_summary_comparison_{timestamp()}.txt", results)

    with contextlib.suppress(OSError):
        append_performance_log(results)

    print(t("msg_benchmark_complete"))


def timestamp() -> str:
    """Return the local time as ``YYYYMMDD-HHMMSS``."""
    return datetime.now().strftime("%Y%m%d-%H%M%S")


def sanitize_filename(name: str) -> str:
    """Replace characters that are awkward in file names with underscores."""
    return name.replace(":", "_").replace("/", "_")


if __name__ == "__main__":
    sys.exit(main())