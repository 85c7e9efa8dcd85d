from __future__ import annotations

from ..core.enums import Direction


def infer_direction(prior_count: int) -> Direction:
    """People alternate entering and exiting, starting with an entry.

    `prior_count` is the number of earlier scans that count for this code. The live
    scan flow counts every ledger row (granted or denied); reports count only the
    authorized ones. Callers pick the count, this function only applies parity.
    """

    if prior_count < 0:
        raise ValueError(f"prior_count must be non-negative, got {prior_count}")
    return Direction.ENTRY if prior_count % 2 == 0 else Direction.EXIT
