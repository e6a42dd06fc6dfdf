"""Message catalogue loaded from a JSON file of per-language string tables."""

from __future__ import annotations

import json
import re
from os import PathLike
from typing import Any

DEFAULT_LANG_PATH = "internal/i18n/lang.json"
_FALLBACK_LANG = "en"

_catalogue: dict[str, dict[str, str]] = {}
_current_lang = _FALLBACK_LANG

_VERB = re.compile(r"%([-+# 0]*\d*(?:\.\d+)?)([vsdqf%])")


def load(lang: str, path: str | PathLike[str] = DEFAULT_LANG_PATH) -> None:
    """Load the catalogue at *path* and select *lang*, falling back to English."""
    global _catalogue, _current_lang
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if data is None:
        data = {}
    if not isinstance(data, dict) or not all(
        isinstance(table, dict) for table in data.values()
    ):
        raise ValueError(f"{path}: expected an object of language tables")
    _catalogue = data
    _current_lang = lang if lang in data else _FALLBACK_LANG


def t(key: str) -> str:
    """Return the message for *key* in the current language, or ``??key??``."""
    return _catalogue.get(_current_lang, {}).get(key, f"??{key}??")


def _fill(template: str, *args: Any) -> str:
    """Substitute printf-style verbs in a catalogue message with *args*."""
    values = iter(args)

    def substitute(match: re.Match[str]) -> str:
        flags, verb = match.groups()
        if verb == "%":
            return "%"
        try:
            value = next(values)
        except StopIteration:
            return f"%!{verb}(MISSING)"
        if verb == "q":
            return json.dumps(str(value), ensure_ascii=False)
        if verb in "vs":
            return f"%{flags}s" % (value,)
        return f"%{flags}{verb}" % (value,)

    return _VERB.sub(substitute, template)