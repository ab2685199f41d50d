"""Best-bucket selection."""

from typing import Iterable, Optional

from pokerlog.models import Bucket


def best_bucket(buckets: Iterable[Bucket]) -> Optional[Bucket]:
    """Pick the bucket with the strictly greatest profit.

    Buckets are scanned in the order given; a later bucket only takes the
    lead with a strictly higher profit, so the earliest of equal maxima
    wins. Every bucket of the grouping takes part in the scan, including
    ones without sessions.

    Args:
        buckets: A complete grouping in its canonical order.

    Returns:
        The winning bucket, or None when no bucket has any sessions.
    """
    buckets = list(buckets)
    if not any(bucket.sessions > 0 for bucket in buckets):
        return None

    leader: Optional[Bucket] = None
    for bucket in buckets:
        if leader is None or bucket.profit > leader.profit:
            leader = bucket
    return leader
