import argparse
import sys
import time
from pathlib import Path
from typing import Iterator

from .collapse import collapse_dinucleotides, dinucleotide_repeat_percentage
from .io import FastAWriter, FastQReader, write_stats_table
from .transforms import ReadTransform
from .types import ReadRecord, RunSummary


def report(message: str, quiet: bool = False) -> None:
    """Print a status line to stderr; stdout is reserved for results."""
    if not quiet:
        print(message, file=sys.stderr)


def stream_reads(
    reads_path: Path, transform: ReadTransform, writer: FastAWriter
) -> RunSummary:
    """Run every paired read through transform and write the ones it keeps."""
    with FastQReader(reads_path) as reader:
        for record in reader:
            sequence = transform(record.sequence)
            if sequence is None:
                reader.summary.rejected += 1
                continue
            writer.write(
                ReadRecord(header=record.header, sequence=sequence),
                suffix=transform.header_suffix,
            )
            reader.summary.emitted += 1
    return reader.summary


def iter_read_stats(reads_path: Path) -> Iterator[tuple[str, int, float, int]]:
    """Yield (header, length, repeat percentage, collapsed length) per read."""
    for record in FastQReader(reads_path):
        yield (
            record.header,
            len(record.sequence),
            dinucleotide_repeat_percentage(record.sequence),
            len(collapse_dinucleotides(record.sequence)),
        )


def run_collapse(args: argparse.Namespace) -> None:
    """Collapse or filter dinucleotide repeats in a reads file."""
    start = time.time()
    reads_path = Path(args.reads)
    output_path = Path(args.output) if args.output else None
    transform = ReadTransform.create(args.threshold, args.suffix)

    with FastAWriter(output_path) as writer:
        summary = stream_reads(reads_path, transform, writer)

    report(
        f"Paired {summary.records:,} reads from {summary.headers:,} headers "
        f"({summary.dropped_headers:,} headers without a sequence).",
        args.quiet,
    )
    if args.threshold > 0:
        report(
            f"Kept {summary.emitted:,} reads, rejected {summary.rejected:,} "
            f"above {args.threshold:g}% dinucleotide repeats.",
            args.quiet,
        )
    else:
        report(f"Collapsed {summary.emitted:,} reads.", args.quiet)
    report(f"Time elapsed: {time.time() - start:.2g} seconds", args.quiet)


def run_stats(args: argparse.Namespace) -> None:
    """Write per-read dinucleotide repeat percentages."""
    start = time.time()
    reads_path = Path(args.reads)
    output_path = Path(args.output) if args.output else None
    n_rows = write_stats_table(iter_read_stats(reads_path), output_path)
    report(f"Wrote repeat statistics for {n_rows:,} reads.", args.quiet)
    report(f"Time elapsed: {time.time() - start:.2g} seconds", args.quiet)
