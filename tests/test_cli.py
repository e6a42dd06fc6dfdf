import io
import json
from datetime import datetime

import pytest
import responses
from responses import matchers

from ollamabench import cli, i18n
from ollamabench.benchmark import BenchmarkResult

API = "http://localhost:11434"

MESSAGES = {
    "menu_title": "MENU",
    "menu_quick": "1) quick",
    "menu_settings": "2) settings",
    "prompt_choose_option": "choose:",
    "msg_invalid_choice": "INVALID CHOICE",
    "msg_invalid_format": "INVALID FORMAT",
    "msg_no_results": "NO RESULTS",
    "msg_benchmark_complete": "DONE",
    "msg_model_running": "running %s with %d prompts x %d",
    "msg_model_error": "model %s failed: %v",
    "msg_loading_models": "loading models",
    "prompt_all_models": "all models",
    "header_model": "Model",
    "header_time": "Time",
    "header_tokens": "Tokens",
    "header_tps": "TPS",
    "header_rank": "Rank",
    "summary_title": "SUMMARY",
    "details_title": "DETAILS",
    "comparison_title": "COMPARISON",
    "err_ollama_status": "status %s",
    "err_prompt_send": "%s: %v",
}


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    lang_file = tmp_path / "lang.json"
    lang_file.write_text(json.dumps({"en": MESSAGES}), encoding="utf-8")
    i18n.load("en", lang_file)
    (tmp_path / "prompts.txt").write_text("hi\n", encoding="utf-8")
    return tmp_path


def _generate(rsps, model, status=200, eval_count=8):
    rsps.add(
        responses.POST,
        f"{API}/api/generate",
        json={"response": "text", "done": True, "eval_count": eval_count},
        status=status,
        match=[matchers.json_params_matcher({"model": model, "prompt": "hi", "stream": False})],
    )


def _tags(rsps, names):
    rsps.add(
        responses.GET,
        f"{API}/api/tags",
        json={"models": [{"name": name} for name in names]},
    )


def test_sanitize_filename_replaces_colons_and_slashes():
    assert cli.sanitize_filename("library/llama3:8b") == "library_llama3_8b"
    assert cli.sanitize_filename("plain") == "plain"


def test_timestamp_shape():
    stamp = cli.timestamp()
    assert len(stamp) == 15
    assert stamp[8] == "-"
    parsed = datetime.strptime(stamp, "%Y%m%d-%H%M%S")
    assert parsed.strftime("%Y%m%d-%H%M%S") == stamp
    assert abs((datetime.now() - parsed).total_seconds()) < 60


def test_main_reports_missing_language_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    cli.main(["--lang-file", str(tmp_path / "missing.json")])
    assert "Language file error" in capsys.readouterr().out


def test_main_invalid_menu_choice(workdir, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n9\n"))
    cli.main(["--lang-file", str(workdir / "lang.json")])
    out = capsys.readouterr().out
    assert "MENU" in out
    assert "INVALID CHOICE" in out


def test_handle_results_empty(workdir, capsys):
    cli.handle_results([], "txt", False, False)
    assert "NO RESULTS" in capsys.readouterr().out
    assert not list(workdir.glob("benchmark*"))


def test_handle_results_multi_model_writes_comparison(workdir, capsys):
    results = [
        BenchmarkResult("a:1", "hi", 1, 10, 1.0, 10.0),
        BenchmarkResult("b/2", "hi", 1, 20, 1.0, 20.0),
    ]
    cli.handle_results(results, "json", True, False)
    assert len(list(workdir.glob("benchmark_detail_a_1_*.txt"))) == 1
    assert len(list(workdir.glob("benchmark_detail_b_2_*.txt"))) == 1
    summary = list(workdir.glob("benchmark_summary_result_*.json"))
    assert len(summary) == 1
    records = json.loads(summary[0].read_text(encoding="utf-8"))
    assert [r["Model"] for r in records] == ["a:1", "b/2"]
    comparison = list(workdir.glob("benchmark_summary_comparison_*.txt"))
    assert len(comparison) == 1
    lines = comparison[0].read_text(encoding="utf-8").splitlines()
    assert lines[1].startswith("b/2\t")
    assert len((workdir / "benchmark.log").read_text(encoding="utf-8").splitlines()) == 2
    out = capsys.readouterr().out
    assert "COMPARISON" in out
    assert out.rstrip().endswith("DONE")


def test_run_all_models_skips_failing_model(workdir, capsys):
    with responses.RequestsMock() as rsps:
        _generate(rsps, "good")
        _generate(rsps, "bad", status=500)
        results = cli.run_all_models(API, ["good", "bad"], ["hi"], 1)
    assert [r.model for r in results] == ["good"]
    assert results[0].tokens == 8
    assert "model bad failed" in capsys.readouterr().out


def test_run_with_settings_invalid_format(workdir, capsys):
    reader = io.StringIO(f"{API}\n\n2\nxml\n")
    cli.run_with_settings(reader)
    assert "INVALID FORMAT" in capsys.readouterr().out
    assert not list(workdir.glob("benchmark*"))


def test_run_with_settings_single_model(workdir, capsys):
    reader = io.StringIO(f"{API}\n\n2\ncsv\nn\n1\n")
    with responses.RequestsMock() as rsps:
        _tags(rsps, ["m:1", "other"])
        _generate(rsps, "m:1")
        _generate(rsps, "m:1")
        cli.run_with_settings(reader)
    summary = list(workdir.glob("benchmark_summary_result_*.csv"))
    assert len(summary) == 1
    rows = summary[0].read_text(encoding="utf-8").splitlines()
    assert rows[0] == "model,prompt,trial,duration_s,tokens,token_per_s"
    assert [row.split(",")[2] for row in rows[1:]] == ["1", "2"]
    assert len(list(workdir.glob("benchmark_detail_m_1_*.txt"))) == 1
    assert not list(workdir.glob("benchmark_summary_comparison_*"))
    out = capsys.readouterr().out
    assert "3) all models" in out
    assert "DETAILS" in out


def test_run_with_settings_out_of_range_selection(workdir, capsys):
    reader = io.StringIO(f"{API}\n\n1\ntxt\nn\n7\n")
    with responses.RequestsMock() as rsps:
        _tags(rsps, ["only"])
        cli.run_with_settings(reader)
    assert "INVALID CHOICE" in capsys.readouterr().out
    assert not list(workdir.glob("benchmark*"))


def test_quick_start_uses_default_url_and_all_models(workdir, capsys):
    with responses.RequestsMock() as rsps:
        _tags(rsps, ["x", "y"])
        _generate(rsps, "x")
        _generate(rsps, "y", eval_count=4)
        cli.run_quick_start(io.StringIO("\n"))
    assert len(list(workdir.glob("benchmark_summary_result_*.txt"))) == 1
    assert len(list(workdir.glob("benchmark_summary_comparison_*.txt"))) == 1
    assert "DONE" in capsys.readouterr().out


def test_quick_start_without_server_reports_no_results(workdir, capsys):
    with responses.RequestsMock(assert_all_requests_are_fired=False):
        cli.run_quick_start(io.StringIO("\n"))
    assert "NO RESULTS" in capsys.readouterr().out