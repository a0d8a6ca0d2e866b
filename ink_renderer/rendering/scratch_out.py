"""
Scratch-Out Resolution

Maps scratch-out annotations onto stroke positions and drops them:
1. Collect every component index from erasing and erased ink ranges
2. Validate against the original stroke count
3. Deduplicate, sort descending
4. Build a new stroke list without those positions

A stroke referenced twice (by both ranges, or by overlapping scratch-outs)
is removed once; its neighbours stay.
"""

import logging
from typing import Iterable, List, Optional, Sequence, TypeVar

from ..data.ink import ScratchOutResult, Stroke
from ..errors import MalformedScratchOutError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def collect_scratch_out_indices(
    scratch_outs: Iterable[ScratchOutResult],
    num_strokes: int
) -> List[int]:
    """
    Component indices to remove, deduplicated, in descending order.

    Raises:
        MalformedScratchOutError: an index is outside [0, num_strokes)
    """
    indices = set()
    for scratch_out in scratch_outs:
        for component in scratch_out.components:
            if not 0 <= component < num_strokes:
                raise MalformedScratchOutError(component, num_strokes)
            indices.add(component)
    return sorted(indices, reverse=True)


def remove_indices(items: Sequence[T], indices: Iterable[int]) -> List[T]:
    """
    New list of items without the given positions.

    Relative order of the remaining items is kept and `items` is not modified.
    The order (and repetition) of `indices` does not matter.
    """
    excluded = set(indices)
    return [item for i, item in enumerate(items) if i not in excluded]


def resolve_visible_strokes(
    strokes: Sequence[Stroke],
    scratch_outs: Optional[Sequence[ScratchOutResult]]
) -> Sequence[Stroke]:
    """
    Strokes still visible after applying scratch-outs.

    With no scratch-outs the input sequence itself is returned; otherwise a
    filtered copy. Callers must not rely on either identity.
    """
    if not scratch_outs:
        return strokes

    indices = collect_scratch_out_indices(scratch_outs, len(strokes))
    visible = remove_indices(strokes, indices)
    logger.debug(
        "Scratch-outs removed %d of %d strokes (%d results)",
        len(indices), len(strokes), len(scratch_outs)
    )
    return visible
