# ollamabench

An interactive command-line benchmark that measures how fast the models on an
Ollama server generate tokens. It sends each prompt to each model a number of
times, records the token count and wall-clock time of every request, and
reports tokens per second.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Message tables

Every message the tool prints is looked up in a JSON file that maps language
codes to tables of message keys, for example:

```json
{
  "en": {"menu_title": "Ollama benchmark", "header_model": "Model"},
  "tr": {"menu_title": "Ollama performans testi", "header_model": "Model"}
}
```

By default the file is read from `internal/i18n/lang.json`, relative to the
working directory; `--lang-file PATH` points the command elsewhere. A language
missing from the file falls back to `en`. A key missing from the selected table
is shown as `??key??`.

The package does not ship a message file. If the file cannot be read or is not
an object of tables, the command prints `⚠️ Language file error:` with the
reason and stops.

## Usage

Put one prompt per line in a text file (`prompts.txt` in the working directory
by default). Leading and trailing whitespace is stripped and blank lines are
skipped. Then run:

```
ollamabench
```

or, with a message file elsewhere:

```
ollamabench --lang-file path/to/lang.json
```

You choose a language first (`1` English, `2` Turkish), then a mode:

1. **Quick start** asks only for the API address (default
   `http://localhost:11434`). It runs every model the server lists once per
   prompt from `prompts.txt` and writes a text summary.
2. **Custom settings** asks for the API address, the prompt file (default
   `prompts.txt`), the number of trials (default 3; input that is not a whole
   number keeps the default), the output format (`csv`, `json` or `txt`; any
   other answer ends the run), a "tokens only" answer (`e` or `y` for yes), and
   which model to run. When the server lists more than one model an extra
   numbered entry runs all of them. The "tokens only" answer is accepted but
   does not currently change any output.

If the prompt file cannot be read or is empty, or the model list cannot be
fetched, the run finishes with the "no results" message. When all models are
run, a model whose request fails is reported and skipped.

## Output

After a run the tool prints a summary table, one row per model sorted by tokens
per second, followed by every trial when a single model was run. It writes
these files to the working directory (`<timestamp>` is local time as
`YYYYMMDD-HHMMSS`):

- `benchmark_detail_<model>_<timestamp>.txt`: summary and per-trial details for
  each model; `:` and `/` in the model name become `_`.
- `benchmark_summary_result_<timestamp>.<format>`: all results in the chosen
  format. CSV has the columns `model, prompt, trial, duration_s, tokens,
  token_per_s`; JSON is an array of objects with `Model`, `Prompt`, `Trial`,
  `Tokens`, `Duration` (nanoseconds) and `TokenPerS`.
- `benchmark_summary_comparison_<timestamp>.txt`: a ranked, tab-separated
  comparison with 🥇 🥈 🥉 for the top three, written (and printed) only when
  more than one model was tested.
- `benchmark.log`: one timestamped line per model is appended for each run.

A request's token count is the server's `eval_count`. When the server reports
none, it is estimated as the UTF-8 byte length of the response divided by four.
Per model, the summary gives the mean duration, the total tokens, and total
tokens divided by total time.

## Library use

The pieces can be used from Python. Load a message file first, or messages
appear as `??key??`:

```python
from ollamabench import i18n
from ollamabench.client import get_model_list
from ollamabench.benchmark import run_benchmark
from ollamabench.output import aggregate

i18n.load("en", "lang.json")
models = get_model_list("http://localhost:11434")
results = run_benchmark("http://localhost:11434", models[0], ["Hello"], 2)
for row in aggregate(results):
    print(row.model, row.token_per_s)
```

Modules:

- `ollamabench.i18n`: `load(lang, path)`, `t(key)`.
- `ollamabench.prompt`: `read_prompts(path)`, raising `PromptFileError`.
- `ollamabench.client`: `get_model_list(api_url)`, raising `ApiError`.
- `ollamabench.benchmark`: `BenchmarkResult`, `send_prompt(api_url, model, prompt)`,
  `run_benchmark(api_url, model, prompts, trials)`, raising `BenchmarkError`.
- `ollamabench.output`: `AggregatedResult`, `aggregate`, `group_by_model`,
  `format_as_table`, `print_details`, `show_comparison`, `write_json`,
  `write_csv`, `write_txt`.
- `ollamabench.comparison`: `write_comparison(path, results)`.
- `ollamabench.logs`: `append_performance_log(results, path)`.
- `ollamabench.cli`: `main(argv=None)` and the steps it is built from.