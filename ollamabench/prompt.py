"""Reading benchmark prompts from a text file."""

from __future__ import annotations

from os import PathLike

from .i18n import _fill, t


class PromptFileError(Exception):
    """The prompt file could not be read or held no prompts."""


def read_prompts(path: str | PathLike[str]) -> list[str]:
    """Return the non-blank, stripped lines of the file at *path*."""
    try:
        fh = open(path, encoding="utf-8")
    except OSError as exc:
        raise PromptFileError(_fill(t("err_file_open"), exc)) from exc
    with fh:
        try:
            prompts = [stripped for line in fh if (stripped := line.strip())]
        except (OSError, UnicodeDecodeError) as exc:
            raise PromptFileError(_fill(t("err_file_read"), exc)) from exc
    if not prompts:
        raise PromptFileError(_fill(t("err_file_empty")))
    return prompts