import json
import re

import pytest

from ollamabench import i18n
from ollamabench.benchmark import BenchmarkResult
from ollamabench.logs import append_performance_log

LINE = re.compile(
    r"^\[\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d(Z|[+-]\d\d:\d\d)\] "
    r"Model: (\S+) \| Time: [\d.]+s \| Tokens: (\d+) \| Tok/s: [\d.]+$"
)


@pytest.fixture(autouse=True)
def catalogue(tmp_path):
    path = tmp_path / "lang.json"
    path.write_text(
        json.dumps(
            {
                "en": {
                    "header_model": "Model",
                    "header_time": "Time",
                    "header_tokens": "Tokens",
                    "header_tps": "Tok/s",
                    "err_file_log": "cannot log: %v",
                }
            }
        ),
        encoding="utf-8",
    )
    i18n.load("en", path)


def make(model, tokens):
    return BenchmarkResult(model, "p", 1, tokens, 2.0, tokens / 2.0)


def test_appends_one_line_per_model(tmp_path):
    log = tmp_path / "bench.log"
    results = [make("a", 30), make("b", 12)]
    append_performance_log(results, log)
    append_performance_log(results, log)
    lines = log.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4
    matches = [LINE.match(line) for line in lines]
    assert all(matches)
    assert [(m.group(2), m.group(3)) for m in matches] == [
        ("a", "30"),
        ("b", "12"),
        ("a", "30"),
        ("b", "12"),
    ]


def test_empty_results_write_nothing(tmp_path):
    log = tmp_path / "bench.log"
    append_performance_log([], log)
    assert log.read_text(encoding="utf-8") == ""


def test_unopenable_log_raises(tmp_path):
    with pytest.raises(OSError, match="^cannot log: "):
        append_performance_log([make("a", 1)], tmp_path)