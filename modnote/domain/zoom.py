from __future__ import annotations

MIN_FONT_SIZE = 8.0
MAX_FONT_SIZE = 72.0


def zoom_font_size(
    current: float,
    notches: int,
    *,
    minimum: float = MIN_FONT_SIZE,
    maximum: float = MAX_FONT_SIZE,
) -> float | None:
    """
    Font size after ``notches`` wheel steps (positive = up = bigger), one point per notch.

    Returns None when nothing should change: no scroll, or the clamped size equals ``current``.
    """
    if notches == 0:
        return None
    proposed = max(minimum, min(maximum, current + notches))
    if proposed == current:
        return None
    return proposed
