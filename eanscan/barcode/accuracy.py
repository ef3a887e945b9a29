"""
Accuracy scoring of decode attempts against a known reference code.
"""

from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field

import numpy as np
import structlog

from eanscan.barcode.decoder import Ean13Decoder
from eanscan.barcode.validator import parse_ean13
from eanscan.models import Decoding

logger = structlog.get_logger(__name__)


@dataclass
class AccuracyReport:
    """Scores of a batch of decode attempts against one reference code."""

    reference: str
    scores: list[float] = field(default_factory=list)
    failures: int = 0
    checksum_passes: int = 0

    @property
    def attempts(self) -> int:
        return len(self.scores)

    @property
    def mean_score(self) -> float:
        """Mean fraction of matching digits, 0.0 for an empty batch."""
        if not self.scores:
            return 0.0
        return sum(self.scores) / len(self.scores)


def _reference_digits(reference: str | Sequence[int]) -> tuple[int, ...]:
    if isinstance(reference, str):
        return parse_ean13(reference)
    digits = tuple(reference)
    if len(digits) != 13:
        raise ValueError(f"Reference must have 13 digits, got {len(digits)}")
    return digits


def score_decoding(decoding: Decoding | None, reference: str | Sequence[int]) -> float:
    """
    Fraction of the 13 positions where the decoding matches the reference.

    A failed attempt (None) scores 0.0.
    """
    expected = _reference_digits(reference)
    if decoding is None:
        return 0.0
    matches = sum(1 for got, want in zip(decoding.digits, expected) if got == want)
    return matches / len(expected)


def evaluate_masks(
    masks: Iterable[np.ndarray],
    reference: str | Sequence[int],
    decoder: Ean13Decoder | None = None,
) -> AccuracyReport:
    """
    Decode each mask and score it against the reference.

    Args:
        masks: Binary masks, ink = 1
        reference: Expected 13-digit code
        decoder: Decoder to use (default: Ean13Decoder())

    Returns:
        AccuracyReport for the batch
    """
    decoder = decoder or Ean13Decoder()
    expected = _reference_digits(reference)
    report = AccuracyReport(reference="".join(str(d) for d in expected))

    for mask in masks:
        result = decoder.scan(mask)
        if not result.succeeded:
            report.failures += 1
        elif result.checksum_valid:
            report.checksum_passes += 1
        report.scores.append(score_decoding(result.decoding, expected))

    logger.info(
        "Batch scored",
        reference=report.reference,
        attempts=report.attempts,
        failures=report.failures,
        mean_score=report.mean_score,
    )
    return report


def evaluate_levels(
    levels: Mapping[Hashable, Iterable[np.ndarray]],
    reference: str | Sequence[int],
    decoder: Ean13Decoder | None = None,
) -> dict[Hashable, AccuracyReport]:
    """
    Score several batches, e.g. captures grouped by noise level.

    Returns:
        One AccuracyReport per level key, in the mapping's order
    """
    decoder = decoder or Ean13Decoder()
    return {level: evaluate_masks(masks, reference, decoder) for level, masks in levels.items()}
