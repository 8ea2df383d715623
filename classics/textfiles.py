"""Line-oriented text file utilities and a raw integer array format."""

from __future__ import annotations

import os
import shutil
import struct
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_CONTEXT = 20
_INT = struct.Struct("<i")


@dataclass(frozen=True)
class FileStats:
    """Counts of newline characters, words and bytes in a file."""

    lines: int
    words: int
    characters: int


def analyze_file(path: PathLike) -> FileStats:
    """Count lines, whitespace-separated words and characters in a file.

    Lines are counted as newline characters, so a final line without a
    newline is not counted; characters are counted as bytes.
    """
    data = Path(path).read_bytes()
    return FileStats(
        lines=data.count(b"\n"),
        words=len(data.split()),
        characters=len(data),
    )


def search_in_file(path: PathLike, word: str) -> list[tuple[int, str]]:
    """Find every occurrence of ``word``, line by line.

    Returns ``(line_number, excerpt)`` pairs with 1-based line numbers.
    The excerpt starts at the match and runs up to 20 characters past
    it, staying within the line. Matches do not overlap.
    """
    if not word:
        raise ValueError("search word must not be empty")
    matches: list[tuple[int, str]] = []
    with open(path, encoding="utf-8", newline="") as handle:
        for line_number, line in enumerate(handle, start=1):
            start = 0
            while (pos := line.find(word, start)) != -1:
                matches.append((line_number, line[pos:pos + len(word) + _CONTEXT]))
                start = pos + len(word)
    return matches


def _write_atomically(path: Path, lines: Iterable[str]) -> None:
    directory = path.parent if str(path.parent) else Path(".")
    fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as out:
            out.writelines(lines)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def replace_in_file(path: PathLike, old: str, new: str) -> int:
    """Replace every occurrence of ``old`` with ``new`` in place.

    Matching is done line by line and does not overlap. Returns the
    number of replacements made.
    """
    if not old:
        raise ValueError("text to replace must not be empty")
    target = Path(path)
    with open(target, encoding="utf-8", newline="") as handle:
        lines = handle.readlines()
    replacements = sum(line.count(old) for line in lines)
    _write_atomically(target, (line.replace(old, new) for line in lines))
    return replacements


def reverse_file(path: PathLike, output: PathLike) -> int:
    """Write the lines of ``path`` to ``output`` in reverse order.

    Returns the number of lines written.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        lines = handle.readlines()
    with open(output, "w", encoding="utf-8", newline="") as out:
        out.writelines(reversed(lines))
    return len(lines)


def merge_files(first: PathLike, second: PathLike, output: PathLike) -> None:
    """Write ``first`` followed by ``second`` to ``output``.

    An input file that does not exist contributes nothing.
    """
    with open(output, "wb") as out:
        for source in (first, second):
            try:
                with open(source, "rb") as handle:
                    shutil.copyfileobj(handle, out)
            except FileNotFoundError:
                continue


def write_int_array(path: PathLike, numbers: Iterable[int]) -> None:
    """Store 32-bit signed integers, little-endian, back to back."""
    values = list(numbers)
    try:
        data = b"".join(_INT.pack(value) for value in values)
    except struct.error as exc:
        raise ValueError(f"value does not fit in 32 bits: {exc}") from None
    Path(path).write_bytes(data)


def read_int_array(path: PathLike, count: int) -> list[int]:
    """Read up to ``count`` integers written by :func:`write_int_array`."""
    if count < 0:
        raise ValueError("count must not be negative")
    with open(path, "rb") as handle:
        data = handle.read(count * _INT.size)
    usable = len(data) - len(data) % _INT.size
    return [value for (value,) in _INT.iter_unpack(data[:usable])]