"""Aggregate bounds of a set of strokes."""

from collections.abc import Sequence
from functools import reduce

from strokeport.domain.bounds import Aabb
from strokeport.domain.strokes import Stroke


def effective_bounds(strokes: Sequence[Stroke], override: Aabb | None = None) -> Aabb | None:
    """Resolve the bounds of stroke content.

    An override always wins, even over an empty stroke list. Otherwise the
    bounds of all strokes are merged, starting from the invalid box which is
    the identity of the merge. The merge is commutative, so stroke order does
    not affect the result.

    Args:
        strokes: Strokes to aggregate
        override: Explicit bounds that replace the computed ones

    Returns:
        The effective bounds, or None when there are no strokes and no override
    """
    if override is not None:
        return override
    if not strokes:
        return None
    return reduce(
        lambda acc, stroke: acc.merged(stroke.bounds()),
        strokes,
        Aabb.new_invalid(),
    )


def content_size(
    strokes: Sequence[Stroke], override: Aabb | None = None
) -> tuple[float, float] | None:
    """Return the (width, height) of the effective bounds, or None."""
    bounds = effective_bounds(strokes, override)
    if bounds is None:
        return None
    return bounds.extents()
