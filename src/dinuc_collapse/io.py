import csv
import gzip
import sys
import zlib
from contextlib import nullcontext
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .types import ReadRecord, RunSummary

HEADER_MARKER = "@"


def open_reads(reads_path: Path) -> TextIO:
    """
    Open a reads file as text, decompressing it when the extension is .gz.

    Files without an extension are read as plain text.
    """
    if reads_path.suffix == ".gz":
        return gzip.open(reads_path, "rt", encoding="utf-8")
    return reads_path.open("r", encoding="utf-8")


def open_output(output_path: Optional[Path]):
    """Return a context manager for output_path, or for stdout when it is None."""
    if output_path is None:
        return nullcontext(sys.stdout)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    return output_path.open("w", newline="", encoding="utf-8")


class FastQReader:
    """
    Pairs every header line with the line right after it.

    Only the line directly following a header is taken as its sequence; any
    other non-header line ('+' lines, quality lines, stray sequence lines)
    is ignored. A header replaced by another header, or left pending at the
    end of the file, yields nothing.
    """
    def __init__(self, reads_path: Path):
        self.reads_path = Path(reads_path)
        self.summary = RunSummary()

    def _lines(self, handle: TextIO):
        line_number = 0
        try:
            for line_number, line in enumerate(handle, start=1):
                yield line.rstrip("\n")
        except (OSError, EOFError, UnicodeDecodeError, zlib.error) as exc:
            raise RuntimeError(
                f"Failed to read line {line_number + 1} of {self.reads_path}"
            ) from exc

    def __iter__(self):
        with open_reads(self.reads_path) as handle:
            pending: Optional[str] = None
            for line in self._lines(handle):
                if line.startswith(HEADER_MARKER):
                    if pending is not None:
                        self.summary.dropped_headers += 1
                    pending = line
                    self.summary.headers += 1
                    continue

                if pending is None:
                    self.summary.ignored_lines += 1
                    continue

                self.summary.records += 1
                yield ReadRecord(header=pending, sequence=line)
                pending = None

            if pending is not None:
                self.summary.dropped_headers += 1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        pass


class FastAWriter:
    """
    A simple FASTA writer; writes to stdout when no file is given.
    """
    def __init__(self, fasta_file: Optional[Path] = None):
        self.fasta_file = fasta_file
        if fasta_file is None:
            self.handle = sys.stdout
        else:
            fasta_file.parent.mkdir(parents=True, exist_ok=True)
            self.handle = fasta_file.open("w", encoding="utf-8")
        self.written = 0

    def write(self, record: ReadRecord, suffix: str = "") -> None:
        """
        Write a record as a '>' header line followed by its sequence.
        """
        self.handle.write(f">{record.header}{suffix}\n{record.sequence}\n")
        self.written += 1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if self.fasta_file is not None:
            self.handle.close()


def write_stats_table(
    rows: Iterable[tuple[str, int, float, int]], output_path: Optional[Path]
) -> int:
    """Stream per-read repeat statistics to a tab-delimited table; returns the row count."""
    n_rows = 0
    with open_output(output_path) as handle:
        writer = csv.writer(handle, delimiter="\t", lineterminator="\n")
        writer.writerow(["header", "length", "repeat_percent", "collapsed_length"])
        for header, length, percentage, collapsed_length in rows:
            writer.writerow([header, str(length), f"{percentage:.4g}", str(collapsed_length)])
            n_rows += 1
    return n_rows
