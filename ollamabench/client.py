"""Querying the model server for its installed models."""

from __future__ import annotations

import requests

from .i18n import _fill, t


class ApiError(Exception):
    """The model list could not be fetched or understood."""


def get_model_list(api_url: str) -> list[str]:
    """Return the names of the models the server at *api_url* offers."""
    try:
        resp = requests.get(f"{api_url}/api/tags")
    except requests.RequestException as exc:
        raise ApiError(_fill(t("err_api_request"), exc)) from exc
    with resp:
        if resp.status_code != 200:
            status = f"{resp.status_code} {resp.reason or ''}".rstrip()
            raise ApiError(_fill(t("err_api_status"), status))
        try:
            parsed = resp.json()
        except ValueError as exc:
            raise ApiError(_fill(t("err_api_parse"), exc)) from exc
    if parsed is None:
        return []
    if not isinstance(parsed, dict):
        raise ApiError(_fill(t("err_api_parse"), "unexpected response shape"))
    models = parsed.get("models") or []
    return [entry.get("name", "") for entry in models if isinstance(entry, dict)]