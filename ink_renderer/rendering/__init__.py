"""
Rendering Package

Modules:
    - parameters: Immutable RenderingParameters
    - scratch_out: Visible strokes after scratch-outs
    - context: Drawing backends (Pillow, matplotlib, recording)
    - math_renderer: Ink and tree renderer
"""

from .parameters import RenderingParameters, to_rgba
from .scratch_out import (
    collect_scratch_out_indices,
    remove_indices,
    resolve_visible_strokes,
)
from .context import (
    DrawingContext,
    PILDrawingContext,
    MatplotlibDrawingContext,
    RecordingDrawingContext,
    DrawCall,
)
from .math_renderer import MathRenderer

__all__ = [
    # Parameters
    'RenderingParameters',
    'to_rgba',
    # Scratch-out
    'collect_scratch_out_indices',
    'remove_indices',
    'resolve_visible_strokes',
    # Contexts
    'DrawingContext',
    'PILDrawingContext',
    'MatplotlibDrawingContext',
    'RecordingDrawingContext',
    'DrawCall',
    # Renderer
    'MathRenderer',
]
