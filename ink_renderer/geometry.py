"""Bounding box composition shared by the ink and symbolic pipelines."""

from typing import Iterable, Optional, Sequence

from .data.ink import BoundingBox, Stroke


def union_box(boxes: Iterable[BoundingBox]) -> BoundingBox:
    """
    Smallest box containing all input boxes.

    Raises:
        ValueError: if no boxes are given
    """
    result = None
    for box in boxes:
        result = box if result is None else result.union(box)
    if result is None:
        raise ValueError("union_box() needs at least one box")
    return result


def global_bounding_box(strokes: Sequence[Stroke]) -> Optional[BoundingBox]:
    """
    Union of the bounding boxes of all strokes.

    Empty strokes have no box and are skipped. Returns None when no stroke
    has any points.
    """
    boxes = [stroke.bounding_box for stroke in strokes]
    boxes = [box for box in boxes if box is not None]
    if not boxes:
        return None
    return union_box(boxes)
