import math
from abc import ABC, abstractmethod
from typing import Optional

from .collapse import collapse_dinucleotides, filter_by_threshold

DEFAULT_SUFFIX = "_dc"


class ReadTransform(ABC):
    """
    Abstract base class for per-read sequence transforms.
    """

    header_suffix = ""

    @abstractmethod
    def __call__(self, sequence: str) -> Optional[str]:
        """
        Transform a single sequence line.

        :param sequence: Sequence line of a read.
        :returns: The sequence to emit, or None to drop the read.
        """
        raise NotImplementedError("Subclasses must implement __call__")

    @staticmethod
    def create(threshold: float = 0.0, suffix: str = DEFAULT_SUFFIX) -> "ReadTransform":
        """
        Factory method picking the transform for a repeat threshold.

        :param threshold: Repeat percentage cutoff; 0 collapses every read.
        :param suffix: Header suffix used when collapsing.
        :returns: CollapseTransform for 0, ThresholdTransform above 0.
        :raises ValueError: If threshold is negative or NaN.
        """
        if math.isnan(threshold) or threshold < 0:
            raise ValueError(f"Threshold must be a non-negative percentage, got {threshold}")
        if threshold == 0:
            return CollapseTransform(suffix)
        return ThresholdTransform(threshold)


class CollapseTransform(ReadTransform):
    """Collapse repeated dinucleotides in every read."""

    def __init__(self, suffix: str = DEFAULT_SUFFIX):
        self.header_suffix = suffix

    def __call__(self, sequence: str) -> str:
        return collapse_dinucleotides(sequence)


class ThresholdTransform(ReadTransform):
    """Keep reads unchanged unless their repeat percentage exceeds the threshold."""

    def __init__(self, threshold: float):
        self.threshold = threshold

    def __call__(self, sequence: str) -> Optional[str]:
        return filter_by_threshold(sequence, self.threshold)
