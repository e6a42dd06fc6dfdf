"""Interactive token-throughput benchmark for models served by an Ollama API."""

__version__ = "0.1.0"