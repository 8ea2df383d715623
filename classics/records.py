"""Student records stored as CSV text or fixed-size binary records."""

from __future__ import annotations

import os
import shutil
import struct
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

CSV_HEADER = "ID,Name,GPA,Age"
NAME_SIZE = 50

_COUNT = struct.Struct("<i")
_RECORD = struct.Struct(f"<i{NAME_SIZE}s2xfi")


@dataclass
class Student:
    """One student record."""

    id: int
    name: str
    gpa: float
    age: int


def _csv_line(student: Student) -> str:
    if not student.name or any(c in student.name for c in ",\r\n"):
        raise ValueError(f"name cannot be stored in CSV: {student.name!r}")
    return f"{student.id},{student.name},{student.gpa:.2f},{student.age}\n"


def _parse_csv_line(line: str) -> Student:
    fields = line.rstrip("\r\n").split(",")
    if len(fields) != 4 or not fields[1]:
        raise ValueError(f"malformed record: {line!r}")
    try:
        return Student(int(fields[0]), fields[1], float(fields[2]), int(fields[3]))
    except ValueError:
        raise ValueError(f"malformed record: {line!r}") from None


def write_csv(path: PathLike, students: Iterable[Student]) -> int:
    """Write a header and one line per student; return the number written."""
    lines = [_csv_line(student) for student in students]
    with open(path, "w", encoding="utf-8", newline="") as out:
        out.write(CSV_HEADER + "\n")
        out.writelines(lines)
    return len(lines)


def read_csv(path: PathLike, max_count: int | None = None) -> list[Student]:
    """Read students from a CSV file written by :func:`write_csv`.

    The first line is taken as the header and skipped. At most
    ``max_count`` records are read when it is given.
    """
    students: list[Student] = []
    with open(path, encoding="utf-8", newline="") as handle:
        handle.readline()
        for line in handle:
            if max_count is not None and len(students) >= max_count:
                break
            students.append(_parse_csv_line(line))
    return students


def append_csv(path: PathLike, student: Student) -> None:
    """Append one student line to an existing CSV file."""
    line = _csv_line(student)
    with open(path, "a", encoding="utf-8", newline="") as out:
        out.write(line)


def _pack(student: Student) -> bytes:
    name = student.name.encode("utf-8")
    if len(name) >= NAME_SIZE or b"\0" in name:
        raise ValueError(f"name does not fit in a record: {student.name!r}")
    try:
        return _RECORD.pack(student.id, name, student.gpa, student.age)
    except struct.error as exc:
        raise ValueError(f"record field out of range: {exc}") from None


def _unpack(fields: tuple) -> Student:
    ident, raw_name, gpa, age = fields
    name = raw_name.split(b"\0", 1)[0].decode("utf-8")
    return Student(ident, name, gpa, age)


def write_binary(path: PathLike, students: Iterable[Student]) -> int:
    """Write a record count followed by fixed-size records; return the count.

    GPA is stored as a 32-bit float, so it reads back rounded.
    """
    records = [_pack(student) for student in students]
    with open(path, "wb") as out:
        out.write(_COUNT.pack(len(records)))
        out.writelines(records)
    return len(records)


def read_binary(path: PathLike, max_count: int | None = None) -> list[Student]:
    """Read records written by :func:`write_binary`, at most ``max_count``."""
    with open(path, "rb") as handle:
        head = handle.read(_COUNT.size)
        if len(head) < _COUNT.size:
            raise ValueError("file too short for a record count")
        (count,) = _COUNT.unpack(head)
        if count < 0:
            raise ValueError(f"invalid record count {count}")
        if max_count is not None:
            count = min(count, max_count)
        data = handle.read(count * _RECORD.size)
    if len(data) < count * _RECORD.size:
        raise ValueError("file is truncated")
    return [_unpack(fields) for fields in _RECORD.iter_unpack(data)]


def read_binary_record(path: PathLike, index: int) -> Student:
    """Seek directly to record ``index`` (0-based) and read it."""
    if index < 0:
        raise IndexError(f"record index {index} out of range")
    with open(path, "rb") as handle:
        handle.seek(_COUNT.size + index * _RECORD.size)
        data = handle.read(_RECORD.size)
    if len(data) < _RECORD.size:
        raise IndexError(f"record index {index} out of range")
    return _unpack(_RECORD.unpack(data))


def count_lines(path: PathLike) -> int:
    """Return the number of newline characters in a file."""
    total = 0
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(1 << 16), b""):
            total += chunk.count(b"\n")
    return total


def copy_file(source: PathLike, dest: PathLike) -> None:
    """Copy the bytes of ``source`` to ``dest``."""
    shutil.copyfile(source, dest)