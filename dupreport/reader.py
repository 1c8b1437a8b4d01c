"""Reading bug reports and their timestamps from the plain-text dataset format.

A report file is a sequence of records of sixteen lines each::

    ID=<id>
    S-U=<terms>   S-B=<terms>   S-T=<terms>
    D-U=<terms>   D-B=<terms>   D-T=<terms>
    A-U=<terms>   A-B=<terms>   A-T=<terms>
    DID=<master id, empty for a master>
    VERSION=<int>
    COMPONENT=<int>
    SUB-COMPONENT=<int>
    TYPE=<int>
    PRIORITY=<int>

where ``<terms>`` is a comma separated list of ``term_id:frequency`` pairs.
Each section tag stands on its own line. Reading stops at the first empty
line where an ``ID=`` line is expected.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Union

from .reports import AbstractBugReport, DuplicateBugReport, MasterBugReport
from .terms import Term

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

_TERM_FIELDS: tuple[tuple[str, str], ...] = (
    ("S-U=", "summary_unigrams"),
    ("S-B=", "summary_bigrams"),
    ("S-T=", "summary_trigrams"),
    ("D-U=", "description_unigrams"),
    ("D-B=", "description_bigrams"),
    ("D-T=", "description_trigrams"),
    ("A-U=", "all_unigrams"),
    ("A-B=", "all_bigrams"),
    ("A-T=", "all_trigrams"),
)

_CATEGORY_FIELDS: tuple[tuple[str, str], ...] = (
    ("VERSION=", "version"),
    ("COMPONENT=", "component"),
    ("SUB-COMPONENT=", "sub_component"),
    ("TYPE=", "report_type"),
    ("PRIORITY=", "priority"),
)

_TIMESTAMP_PAIR = re.compile(r"(\d+)=\s*(\d+)")


class ReportFormatError(ValueError):
    """Raised when a report file does not follow the expected layout."""


def parse_terms(text: str) -> list[Term]:
    """Parse ``id:frequency`` pairs separated by commas; empty items are skipped."""
    terms: list[Term] = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        tid_text, sep, tf_text = item.partition(":")
        if not sep:
            raise ReportFormatError(f"term {item!r} has no ':' separator")
        try:
            terms.append(Term(int(tid_text), int(tf_text)))
        except ValueError as exc:
            raise ReportFormatError(f"malformed term {item!r}") from exc
    return terms


def _is_empty_path(path: PathLike | None) -> bool:
    return path is None or os.fspath(path) == ""


class TimestampMap:
    """Report id to timestamp (in days), read from ``id=timestamp`` entries.

    Without a path every report has timestamp 0.
    """

    def __init__(self, path: PathLike | None = None) -> None:
        self._map: dict[int, int] | None
        if _is_empty_path(path):
            self._map = None
            return
        text = Path(path).read_text(encoding="utf-8")
        self._map = {
            int(report_id): int(stamp)
            for report_id, stamp in _TIMESTAMP_PAIR.findall(text)
        }

    def get(self, report_id: int) -> int:
        """The timestamp of a report; raises KeyError if a loaded map lacks it."""
        if self._map is None:
            return 0
        try:
            return self._map[report_id]
        except KeyError:
            raise KeyError(f"cannot find timestamp for report {report_id}") from None

    def __contains__(self, report_id: object) -> bool:
        return self._map is None or report_id in self._map

    def __len__(self) -> int:
        return 0 if self._map is None else len(self._map)


class _LineCursor:
    """Hands out the lines of a record, checking each one's tag."""

    def __init__(self, lines: Iterator[tuple[int, str]]) -> None:
        self._lines = lines

    def field(self, tag: str) -> str:
        try:
            lineno, line = next(self._lines)
        except StopIteration:
            raise ReportFormatError(f"file ends where {tag!r} is expected") from None
        if not line.startswith(tag):
            raise ReportFormatError(f"line {lineno}: expected {tag!r}, found {line!r}")
        return line[len(tag):]


def _int_value(value: str, tag: str, *, allow_empty: bool = True) -> int:
    value = value.strip()
    if not value:
        if allow_empty:
            return 0
        raise ReportFormatError(f"{tag!r} has no value")
    try:
        return int(value)
    except ValueError as exc:
        raise ReportFormatError(f"{tag!r} has a non-integer value {value!r}") from exc


def read_reports(
    report_path: PathLike, timestamp_path: PathLike | None = None
) -> tuple[list[AbstractBugReport], int]:
    """Read all reports from a file; returns the reports and the largest term id."""
    timestamps = TimestampMap(timestamp_path)
    reports: list[AbstractBugReport] = []
    max_term_id = 0

    with open(report_path, encoding="utf-8") as handle:
        numbered = enumerate((line.rstrip("\r\n") for line in handle), start=1)
        cursor = _LineCursor(numbered)
        for lineno, id_line in numbered:
            if not id_line:
                break
            if not id_line.startswith("ID="):
                raise ReportFormatError(
                    f"line {lineno}: expected 'ID=', found {id_line!r}"
                )
            report_id = _int_value(id_line[3:], "ID=", allow_empty=False)

            fields: dict[str, object] = {}
            for tag, name in _TERM_FIELDS:
                terms = parse_terms(cursor.field(tag))
                max_term_id = max([max_term_id, *(t.tid for t in terms)])
                fields[name] = terms

            did_text = cursor.field("DID=").strip()
            duplicate_id = (
                _int_value(did_text, "DID=") if did_text else report_id
            )

            for tag, name in _CATEGORY_FIELDS:
                fields[name] = _int_value(cursor.field(tag), tag)

            fields["timestamp_in_days"] = timestamps.get(report_id)

            report: AbstractBugReport
            if duplicate_id == report_id:
                report = MasterBugReport(report_id, **fields)
            else:
                report = DuplicateBugReport(report_id, duplicate_id, **fields)
            reports.append(report)

    return reports, max_term_id


class ReportDataset:
    """All reports of a dataset file, kept as originals to hand out copies of."""

    def __init__(
        self, report_path: PathLike, timestamp_path: PathLike | None = None
    ) -> None:
        _log.info("reading reports from %s", os.fspath(report_path))
        if not _is_empty_path(timestamp_path):
            _log.info("reading time-stamps from %s", os.fspath(timestamp_path))
        reports, max_term_id = read_reports(report_path, timestamp_path)
        self.reports: tuple[AbstractBugReport, ...] = tuple(reports)
        self.max_term_id = max_term_id

    def copies(self) -> list[AbstractBugReport]:
        """Fresh copies of every report, in file order, with no bucket links."""
        return [report.copy() for report in self.reports]

    def __len__(self) -> int:
        return len(self.reports)

    def __iter__(self) -> Iterator[AbstractBugReport]:
        return iter(self.reports)