_COMPLEMENT = {"A": "T", "T": "A", "G": "C", "C": "G"}


def reverse_complement(sequence: str) -> str:
    """Reverse complement; anything outside A/C/G/T (including N) becomes N."""
    return "".join(_COMPLEMENT.get(base, "N") for base in reversed(sequence))


def reverse_dinucleotide(pair: str) -> str:
    """Flip a dinucleotide, e.g. "AG" -> "GA"."""
    return pair[::-1]
