def tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero (C-style, not floor)."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def ease(current: int, target: int) -> int:
    """One smoothing step: move halfway from current toward target.

    Truncated halving stalls one unit short of the target, so the last
    step lands on it exactly.
    """
    halfway = tdiv(current + target, 2)
    if halfway == current:
        return target
    return halfway


def clamp(value: int, min_val: int, max_val: int) -> int:
    """Clamp value between min_val and max_val."""
    return max(min_val, min(max_val, value))
