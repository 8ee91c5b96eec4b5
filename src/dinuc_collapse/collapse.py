from typing import Optional


def collapse_dinucleotides(sequence: str) -> str:
    """
    Remove dinucleotide windows that repeat the window right before them.

    The sequence is read in non-overlapping pairs (0-1, 2-3, ...). A pair is
    dropped when it equals the previous pair and its two characters differ,
    so "AGAGAG" becomes "AG" while "AAAA" is left alone. A trailing unpaired
    character is never emitted.

    :param sequence: Nucleotide sequence.
    :returns: The collapsed sequence, always of even length.
    """
    kept = []
    prev_c1 = "A"
    prev_c2 = "A"
    for i in range(0, len(sequence) - 1, 2):
        c1 = sequence[i]
        c2 = sequence[i + 1]
        if not (c1 == prev_c1 and c2 == prev_c2 and c1 != c2):
            kept.append(c1)
            kept.append(c2)
        prev_c1 = c1
        prev_c2 = c2
    return "".join(kept)


def count_repeat_bases(sequence: str) -> tuple:
    """
    Count bases covered by repeated dinucleotide windows.

    :param sequence: Nucleotide sequence.
    :returns: (repeat bases, paired bases); the trailing unpaired character
        of an odd-length sequence is in neither count.
    """
    repeat = 0
    total = 0
    prev_c1 = "A"
    prev_c2 = "A"
    for i in range(0, len(sequence) - 1, 2):
        c1 = sequence[i]
        c2 = sequence[i + 1]
        total += 2
        if c1 == prev_c1 and c2 == prev_c2 and c1 != c2:
            repeat += 2
        prev_c1 = c1
        prev_c2 = c2
    return repeat, total


def dinucleotide_repeat_percentage(sequence: str) -> float:
    """Percentage of paired bases that sit in repeated windows (0.0 if none are paired)."""
    repeat, total = count_repeat_bases(sequence)
    if total == 0:
        return 0.0
    return repeat * 100.0 / total


def filter_by_threshold(sequence: str, threshold: float) -> Optional[str]:
    """
    Reject a read whose dinucleotide repeat content is above a threshold.

    :param sequence: Nucleotide sequence.
    :param threshold: Maximum allowed repeat percentage.
    :returns: The unmodified sequence, or None if its repeat percentage is
        strictly greater than threshold.
    """
    if dinucleotide_repeat_percentage(sequence) > threshold:
        return None
    return sequence
