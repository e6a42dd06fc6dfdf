[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ollamabench"
version = "0.1.0"
description = "Interactive throughput benchmark for models served by an Ollama API"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["ollama", "benchmark", "llm", "tokens-per-second"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
ollamabench = "ollamabench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ollamabench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
