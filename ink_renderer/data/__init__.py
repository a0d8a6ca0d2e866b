"""
Ink Data

- Stroke / BoundingBox: raw pen input and its geometry
- InkRange / ScratchOutResult / RecognitionResult: recognizer annotations
- load_strokes: read strokes from JSON or InkML
"""

from .ink import (
    BoundingBox,
    Stroke,
    InkRange,
    ScratchOutResult,
    RecognitionResult,
    InkMLStrokeParser,
    load_strokes,
)

__all__ = [
    'BoundingBox',
    'Stroke',
    'InkRange',
    'ScratchOutResult',
    'RecognitionResult',
    'InkMLStrokeParser',
    'load_strokes',
]
