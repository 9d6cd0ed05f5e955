"""Small path and optional-value helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

_I8_MAX = 127


def path_absolute_form(path: Union[str, Path]) -> Path:
    """Return ``path`` unchanged if absolute, else joined onto the working directory.

    A leading ``.`` component is dropped. Raises OSError if the working
    directory cannot be determined.
    """
    path = Path(path)
    if path.is_absolute():
        return path
    return Path.cwd() / path


def absolute_path(path: Union[str, Path]) -> Path:
    """Like :func:`path_absolute_form`, dropping a leading ``\\?`` on Windows."""
    result = path_absolute_form(path)
    if os.name == "nt":
        text = str(result)
        while text.startswith("\\?"):
            text = text[2:]
        result = Path(text)
    return result


def plus_one(value: Optional[int]) -> Optional[int]:
    """Return ``value + 1``, or None for None.

    Values are signed bytes; going past 127 raises OverflowError.
    """
    if value is None:
        return None
    if value >= _I8_MAX:
        raise OverflowError("attempt to add with overflow")
    return value + 1