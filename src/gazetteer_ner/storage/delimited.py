"""
Semicolon-delimited file formats.

- Gazetteer: one entry per line, no header, no quoting.
- Match table: header ``File;<pattern_1>;...;<pattern_n>``, one row per
  document, empty cell for no match, no quoting.
- Gold standard: no header, one row per document; the first column is
  the document id and the remaining columns are expected entity strings.
  Empty cells mark a missing entity, not the literal string "".

Quoting is disabled everywhere. Files this module writes (gazetteer,
match table) backslash-escape a delimiter or backslash inside a value.
The gold standard is written by hand and read verbatim: a backslash is
an ordinary character and every ``;`` separates cells.
"""

import csv
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List

from gazetteer_ner.errors import GoldStandardError
from gazetteer_ner.models.entities import MatchList

if TYPE_CHECKING:
    from gazetteer_ner.matching.scanner import MatchTable

logger = logging.getLogger(__name__)

DELIMITER = ";"
ESCAPE_CHAR = "\\"
DOCUMENT_ID_HEADER = "File"


def _writer(handle):
    return csv.writer(
        handle,
        delimiter=DELIMITER,
        quoting=csv.QUOTE_NONE,
        escapechar=ESCAPE_CHAR,
        lineterminator="\n",
    )


def _reader(handle, escapechar=ESCAPE_CHAR):
    return csv.reader(
        handle,
        delimiter=DELIMITER,
        quoting=csv.QUOTE_NONE,
        escapechar=escapechar,
    )


def write_gazetteer(entries: Iterable[str], path: Path) -> None:
    """Write one gazetteer entry per line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = _writer(f)
        for entry in entries:
            writer.writerow([entry])


def read_gazetteer(path: Path) -> List[str]:
    """Read a gazetteer file, ignoring blank lines."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return [row[0] for row in _reader(f) if row and row[0]]


def write_match_table(table: "MatchTable", path: Path) -> Path:
    """
    Write a match table.

    Args:
        table: Result of a corpus scan
        path: Output file

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = _writer(f)
        writer.writerow(table.header)
        for document_id, row in zip(table.document_ids, table.rows):
            writer.writerow([document_id] + [cell.surface for cell in row])
    logger.info(
        "Wrote match table (%d documents x %d patterns) to %s",
        len(table.document_ids),
        len(table.patterns),
        path,
    )
    return path


def read_match_table(path: Path) -> MatchList:
    """
    Read a match table written by ``write_match_table`` back as a match list.

    Cell values are trimmed of surrounding whitespace, mirroring
    ``to_match_list`` on an in-memory table.
    """
    match_list: Dict[str, List[str]] = {}
    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = _reader(f)
        next(reader, None)
        for row in reader:
            if not row:
                continue
            match_list[row[0]] = [c.strip() for c in row[1:] if c.strip()]
    return match_list


def read_gold_standard(path: Path, strip_cells: bool = False) -> MatchList:
    """
    Load a gold-standard match list.

    Args:
        path: Gold-standard file
        strip_cells: Trim surrounding whitespace from entity cells

    Returns:
        Mapping of document id to expected entity strings, in file order

    Raises:
        GoldStandardError: If the file is missing, a row has no document
            id, or a document id occurs twice
    """
    path = Path(path)
    if not path.is_file():
        raise GoldStandardError(f"Gold-standard file not found: {path}")

    gold: Dict[str, List[str]] = {}
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for line_no, row in enumerate(_reader(f, escapechar=None), start=1):
                if not row or not any(row):
                    continue
                document_id = row[0].strip()
                if not document_id:
                    raise GoldStandardError(f"{path}:{line_no}: missing document id")
                if document_id in gold:
                    raise GoldStandardError(
                        f"{path}:{line_no}: duplicate document id '{document_id}'"
                    )
                cells = [c.strip() for c in row[1:]] if strip_cells else row[1:]
                gold[document_id] = [c for c in cells if c != ""]
    except (UnicodeDecodeError, csv.Error) as exc:
        raise GoldStandardError(f"Cannot parse gold-standard file {path}: {exc}") from exc

    logger.info("Loaded gold standard for %d documents from %s", len(gold), path)
    return gold


__all__ = [
    "DELIMITER",
    "write_gazetteer",
    "read_gazetteer",
    "write_match_table",
    "read_match_table",
    "read_gold_standard",
]
