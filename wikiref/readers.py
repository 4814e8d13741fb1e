"""Read QIDs and Wikipedia titles from list files and OSM tag exports.

The ``scan_*`` functions return parsed values and per-line diagnostics as data.
The ``parse_*`` functions wrap them and send the diagnostics to the log.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

from . import config
from .errors import MissingColumnError, ParseErrorKind, ParseLineError
from .qid import ParseQidError, Qid
from .title import ParseTitleError, Title
from .utils import open_text, read_text

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class TagFileScan:
    qids: set[Qid] = field(default_factory=set)
    titles: set[Title] = field(default_factory=set)
    errors: list[ParseLineError] = field(default_factory=list)


def _split_lines(text: str) -> list[str]:
    # Only "\n" and "\r\n" end a line.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _scan_lines(
    path,
    parse: Callable[[str], T],
    kind: ParseErrorKind,
) -> tuple[set[T], list[ParseLineError]]:
    values: set[T] = set()
    errors: list[ParseLineError] = []
    for line_num, line in enumerate(_split_lines(read_text(path, newline="")), start=1):
        try:
            values.add(parse(line))
        except (ParseQidError, ParseTitleError) as exc:
            errors.append(ParseLineError(text=line, line=line_num, kind=kind, error=exc))
    return values, errors


def scan_wikidata_file(path) -> tuple[set[Qid], list[ParseLineError]]:
    """Parse a file with one QID per line."""
    return _scan_lines(path, Qid.parse, ParseErrorKind.QID)


def scan_wikipedia_file(path) -> tuple[set[Title], list[ParseLineError]]:
    """Parse a file with one Wikipedia article url per line."""
    return _scan_lines(path, Title.from_url, ParseErrorKind.TITLE)


def parse_wikidata_file(path) -> set[Qid]:
    qids, errors = scan_wikidata_file(path)
    for error in errors:
        logger.warning("[!] Could not parse QID: %s", error)
    return qids


def parse_wikipedia_file(path) -> set[Title]:
    titles, errors = scan_wikipedia_file(path)
    for error in errors:
        logger.warning("[!] Could not parse wikipedia title: %s", error)
    return titles


def _find_columns(header: list[str], path) -> tuple[int, int, Optional[int]]:
    qid_col = None
    title_col = None
    osm_id_col = None
    for column, name in enumerate(header):
        if name == config.QID_COLUMN:
            qid_col = column
        elif name == config.TITLE_COLUMN:
            title_col = column
        elif name == config.OSM_ID_COLUMN:
            osm_id_col = column

    if qid_col is None:
        raise MissingColumnError(config.QID_COLUMN, path)
    if title_col is None:
        raise MissingColumnError(config.TITLE_COLUMN, path)
    return qid_col, title_col, osm_id_col


def _parse_osm_id(cell: str) -> Optional[int]:
    if config.OSM_ID_PATTERN.fullmatch(cell):
        return int(cell)
    return None


def _printable(text: str) -> str:
    # Undecodable bytes are kept as lone surrogates by the reader.
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _check_record(row: list[str], width: int) -> Optional[csv.Error]:
    if len(row) != width:
        return csv.Error(f"found record with {len(row)} fields, but the header has {width} fields")
    try:
        config.TSV_DELIMITER.join(row).encode("utf-8")
    except UnicodeEncodeError:
        return csv.Error("record is not valid UTF-8")
    return None


def scan_osm_tag_file(path) -> TagFileScan:
    """Collect QIDs and titles from a tab-separated OSM tag export.

    The header must name ``wikidata`` and ``wikipedia`` columns, otherwise
    :class:`MissingColumnError` is raised before any row is read. ``@id`` is
    optional and only used to label diagnostics.

    Malformed rows and unparseable cells are recorded in ``errors`` and
    skipped. ``OSError`` while reading is not caught.
    """
    scan = TagFileScan()
    with open_text(path, errors="surrogateescape", newline="") as fh:
        reader = csv.reader(fh, delimiter=config.TSV_DELIMITER)
        header = next(reader, None) or []
        qid_col, title_col, osm_id_col = _find_columns(header, path)

        while True:
            try:
                row = next(reader)
            except StopIteration:
                break
            # attempt to recover from parsing errors
            except csv.Error as exc:
                scan.errors.append(ParseLineError(text="", line=reader.line_num, kind=ParseErrorKind.TSV, error=exc))
                continue

            if not row:
                continue
            line_num = reader.line_num

            bad_record = _check_record(row, len(header))
            if bad_record is not None:
                text = _printable(config.TSV_DELIMITER.join(row))
                scan.errors.append(ParseLineError(text=text, line=line_num, kind=ParseErrorKind.TSV, error=bad_record))
                continue

            osm_id = _parse_osm_id(row[osm_id_col]) if osm_id_col is not None else None

            qid = row[qid_col].strip()
            if qid:
                try:
                    scan.qids.add(Qid.parse(qid))
                except ParseQidError as exc:
                    scan.errors.append(
                        ParseLineError(text=qid, line=line_num, kind=ParseErrorKind.QID, error=exc, osm_id=osm_id)
                    )

            title = row[title_col].strip()
            if title:
                try:
                    scan.titles.add(Title.from_osm_tag(title))
                except ParseTitleError as exc:
                    scan.errors.append(
                        ParseLineError(text=title, line=line_num, kind=ParseErrorKind.TITLE, error=exc, osm_id=osm_id)
                    )

    return scan


def parse_osm_tag_file(
    path,
    qids: set[Qid],
    titles: set[Title],
    line_errors: Optional[list[ParseLineError]] = None,
) -> list[ParseLineError]:
    """Add the QIDs and titles of a tag file to ``qids`` and ``titles``.

    Diagnostics are logged at debug level, appended to ``line_errors`` when
    given, and returned.
    """
    scan = scan_osm_tag_file(path)
    qids.update(scan.qids)
    titles.update(scan.titles)
    for error in scan.errors:
        logger.debug("Tag parse error: %s", error)
    if line_errors is not None:
        line_errors.extend(scan.errors)
    return scan.errors
