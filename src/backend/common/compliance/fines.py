from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from .constants import MAX_FINE_PER_VIOLATION, MIN_FINE_PER_VIOLATION
from .models import FineEstimate


def estimate_fines(violations: Sequence[str]) -> FineEstimate:
    """Potential EPA exposure: linear in the number of violations.

    The daily figure uses the per-violation minimum.
    """
    count = len(violations)
    return FineEstimate(
        min_fine=Decimal(MIN_FINE_PER_VIOLATION) * count,
        max_fine=Decimal(MAX_FINE_PER_VIOLATION) * count,
        daily_fine=Decimal(MIN_FINE_PER_VIOLATION) * count,
    )
