from .collapse import (
    collapse_dinucleotides,
    count_repeat_bases,
    dinucleotide_repeat_percentage,
    filter_by_threshold,
)
from .nucleotides import reverse_complement, reverse_dinucleotide
from .transforms import CollapseTransform, ReadTransform, ThresholdTransform
from .types import ReadRecord, RunSummary
