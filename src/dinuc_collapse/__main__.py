import argparse
import math

from .cmd import run_collapse, run_stats
from .transforms import DEFAULT_SUFFIX


def threshold_type(value: str) -> float:
    """Parse a non-negative repeat percentage."""
    try:
        threshold = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold: {value!r}")
    if math.isnan(threshold) or threshold < 0:
        raise argparse.ArgumentTypeError(
            f"threshold must be a non-negative percentage, got {value!r}"
        )
    return threshold


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dinuc_collapse",
        description="Collapse or filter dinucleotide repeats in sequencing reads",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    collapse_parser = subparsers.add_parser(
        "collapse", help="Collapse repeated dinucleotides, or filter reads by repeat content"
    )
    collapse_parser.add_argument(
        "--reads", "-r", required=True, help="Input FASTQ file (.gz is decompressed)"
    )
    collapse_parser.add_argument(
        "--threshold",
        "-t",
        type=threshold_type,
        default=0.0,
        help="Drop reads whose repeat percentage exceeds this; 0 collapses every read",
    )
    collapse_parser.add_argument(
        "--suffix",
        default=DEFAULT_SUFFIX,
        help="Suffix appended to headers of collapsed reads",
    )
    collapse_parser.add_argument(
        "--output", "-o", default=None, help="Output FASTA file (default: stdout)"
    )
    collapse_parser.add_argument(
        "--quiet", "-q", action="store_true", help="Do not print a summary to stderr"
    )
    collapse_parser.set_defaults(func=run_collapse)

    stats_parser = subparsers.add_parser(
        "stats", help="Report the dinucleotide repeat percentage of every read"
    )
    stats_parser.add_argument(
        "--reads", "-r", required=True, help="Input FASTQ file (.gz is decompressed)"
    )
    stats_parser.add_argument(
        "--output", "-o", default=None, help="Output TSV file (default: stdout)"
    )
    stats_parser.add_argument(
        "--quiet", "-q", action="store_true", help="Do not print a summary to stderr"
    )
    stats_parser.set_defaults(func=run_stats)

    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
