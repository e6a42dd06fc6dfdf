"""Timing generation requests against a model server."""

from __future__ import annotations

import math
import time
from collections.abc import Iterable
from dataclasses import dataclass

import requests

from .i18n import _fill, t


@dataclass(frozen=True)
class BenchmarkResult:
    """One timed generation; *duration* is in seconds."""

    model: str
    prompt: str
    trial: int
    tokens: int
    duration: float
    token_per_s: float


class BenchmarkError(Exception):
    """A generation request failed."""


def send_prompt(api_url: str, model: str, prompt: str) -> int:
    """Send one non-streaming generation request and return its token count."""
    body = {"model": model, "prompt": prompt, "stream": False}
    try:
        resp = requests.post(f"{api_url}/api/generate", json=body)
    except requests.RequestException as exc:
        raise BenchmarkError(_fill(t("err_ollama_connection"), exc)) from exc
    with resp:
        if resp.status_code != 200:
            status = f"{resp.status_code} {resp.reason or ''}".rstrip()
            raise BenchmarkError(_fill(t("err_ollama_status"), status))
        try:
            parsed = resp.json()
        except ValueError as exc:
            raise BenchmarkError(_fill(t("err_ollama_parse"), exc)) from exc
    if not isinstance(parsed, dict):
        raise BenchmarkError(_fill(t("err_ollama_parse"), "unexpected response shape"))

    tokens = int(parsed.get("eval_count") or 0)
    if tokens == 0:
        tokens = len(str(parsed.get("response") or "").encode("utf-8")) // 4
    return tokens


def _rate(tokens: int, seconds: float) -> float:
    if seconds > 0:
        return tokens / seconds
    return math.inf if tokens else math.nan


def run_benchmark(
    api_url: str, model: str, prompts: Iterable[str], trials: int
) -> list[BenchmarkResult]:
    """Run every prompt *trials* times against *model* and time each run."""
    prompts = list(prompts)
    print(_fill(t("msg_model_running"), model, len(prompts), trials))

    results = []
    for prompt in prompts:
        for trial in range(1, trials + 1):
            start = time.perf_counter()
            try:
                tokens = send_prompt(api_url, model, prompt)
            except BenchmarkError as exc:
                raise BenchmarkError(_fill(t("err_prompt_send"), model, exc)) from exc
            duration = time.perf_counter() - start
            results.append(
                BenchmarkResult(
                    model=model,
                    prompt=prompt,
                    trial=trial,
                    tokens=tokens,
                    duration=duration,
                    token_per_s=_rate(tokens, duration),
                )
            )
    return results