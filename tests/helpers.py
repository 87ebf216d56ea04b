def scores_for_total(total: int) -> list:
    """Seven valid scores (1-5) adding up to `total` (7-35)."""
    scores = [1] * 7
    remaining = total - 7
    for i in range(7):
        step = min(4, remaining)
        scores[i] += step
        remaining -= step
    return scores
