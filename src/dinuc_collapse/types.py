from dataclasses import dataclass


@dataclass(slots=True)
class ReadRecord:
    """A header line paired with the sequence line that follows it."""
    header: str
    sequence: str


@dataclass(slots=True)
class RunSummary:
    """Counters collected while streaming one reads file."""
    headers: int = 0
    records: int = 0
    emitted: int = 0
    rejected: int = 0
    ignored_lines: int = 0
    dropped_headers: int = 0
