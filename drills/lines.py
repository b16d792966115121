"""Reading the leading lines of a text file."""

from __future__ import annotations

import os
from itertools import islice

LINE_LIMIT = 10


def first_lines(file_name: str | os.PathLike) -> str:
    """Return up to the first ten lines of a file, joined by newlines.

    A file that cannot be opened yields an empty string.
    """
    try:
        with open(file_name, "rb") as handle:
            lines = [
                raw.rstrip(b"\n").removesuffix(b"\r").decode("utf-8", errors="replace")
                for raw in islice(handle, LINE_LIMIT)
            ]
    except OSError:
        return ""
    return "\n".join(lines)