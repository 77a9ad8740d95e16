def compute_score(total_pairs: int, attempts: int) -> int:
    """Score a finished game on a 0-100 scale.

    Perfect play (one attempt per pair) scores 100; every wasted attempt
    lowers it proportionally. Rounds half up. Returns 0 before any attempt.
    """
    if attempts <= 0:
        return 0
    # floor(100 * pairs / attempts + 0.5) in integer arithmetic
    raw = (200 * total_pairs + attempts) // (2 * attempts)
    return max(0, min(100, raw))
