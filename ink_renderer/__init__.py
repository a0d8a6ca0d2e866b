"""
Ink Renderer

Renders handwriting recognition results: raw ink with scratch-outs removed,
and recognized math trees with optional diagnostic bounding boxes.

Usage:
    from ink_renderer import MathRenderer, RenderingParameters, PILDrawingContext

    renderer = MathRenderer()
    context = PILDrawingContext.new(800, 600)
    renderer.draw_strokes_by_recognition_result(
        strokes, result, RenderingParameters(show_bounding_boxes=True), context
    )
    context.save("ink.png")
"""

from .data import (
    BoundingBox,
    Stroke,
    InkRange,
    ScratchOutResult,
    RecognitionResult,
    load_strokes,
)
from .errors import (
    RenderingError,
    MalformedScratchOutError,
    UnsupportedNodeKindError,
    UnresolvedCandidateError,
    UnresolvedGeometryError,
)
from .geometry import union_box, global_bounding_box
from .model import (
    MathNode,
    TerminalNode,
    NonTerminalNode,
    RuleNode,
    math_node_from_dict,
    InkLayout,
)
from .rendering import (
    RenderingParameters,
    resolve_visible_strokes,
    DrawingContext,
    PILDrawingContext,
    MatplotlibDrawingContext,
    RecordingDrawingContext,
    MathRenderer,
)

__all__ = [
    # Data
    'BoundingBox',
    'Stroke',
    'InkRange',
    'ScratchOutResult',
    'RecognitionResult',
    'load_strokes',
    # Errors
    'RenderingError',
    'MalformedScratchOutError',
    'UnsupportedNodeKindError',
    'UnresolvedCandidateError',
    'UnresolvedGeometryError',
    # Geometry
    'union_box',
    'global_bounding_box',
    # Tree
    'MathNode',
    'TerminalNode',
    'NonTerminalNode',
    'RuleNode',
    'math_node_from_dict',
    'InkLayout',
    # Rendering
    'RenderingParameters',
    'resolve_visible_strokes',
    'DrawingContext',
    'PILDrawingContext',
    'MatplotlibDrawingContext',
    'RecordingDrawingContext',
    'MathRenderer',
]
