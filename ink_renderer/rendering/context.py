"""
Drawing Contexts

Backends that receive the renderer's draw calls. Coordinates are passed
through untouched: viewport transforms are the host's business.

Backends:
    - PILDrawingContext: Pillow RGB image, RGBA colors alpha-blended
    - MatplotlibDrawingContext: matplotlib Axes, for notebooks and figures
    - RecordingDrawingContext: records calls, draws nothing

Usage:
    context = PILDrawingContext.new(800, 600)
    renderer.draw_strokes_by_recognition_result(strokes, result, params, context)
    context.save("out.png")
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, NamedTuple, Tuple, Union

import matplotlib.patches as mpatches
from PIL import Image, ImageDraw

from ..configs import render_defaults
from ..data.ink import BoundingBox, Stroke
from .parameters import Color, RenderingParameters, to_rgba


class DrawingContext(ABC):
    """Target surface for draw calls."""

    @abstractmethod
    def draw_stroke(self, stroke: Stroke, parameters: RenderingParameters):
        """Draw one pen stroke as a polyline."""

    @abstractmethod
    def draw_shape(self, box: BoundingBox, parameters: RenderingParameters):
        """Draw a recognized symbol occupying box."""

    @abstractmethod
    def draw_bounding_box(self, box: BoundingBox, parameters: RenderingParameters):
        """Draw a diagnostic rectangle."""


# =============================================================================
# Pillow
# =============================================================================

class PILDrawingContext(DrawingContext):
    """Draw onto a Pillow image."""

    def __init__(self, image: Image.Image):
        # RGB target + RGBA draw mode blends translucent fills
        if image.mode != 'RGB':
            image = image.convert('RGB')
        self.image = image
        self.draw = ImageDraw.Draw(self.image, 'RGBA')

    @classmethod
    def new(
        cls,
        width: int = render_defaults.DEFAULT_CANVAS_SIZE[0],
        height: int = render_defaults.DEFAULT_CANVAS_SIZE[1],
        background: Union[str, Tuple[int, ...]] = render_defaults.DEFAULT_BACKGROUND
    ) -> 'PILDrawingContext':
        return cls(Image.new('RGB', (width, height), to_rgba(background)[:3]))

    def draw_stroke(self, stroke: Stroke, parameters: RenderingParameters):
        if stroke.num_points == 0:
            return
        width = max(1, int(round(parameters.width)))
        points = [(float(p[0]), float(p[1])) for p in stroke.points]
        if len(points) == 1:
            # Single tap: dot of the stroke width
            x, y = points[0]
            r = width / 2
            self.draw.ellipse([x - r, y - r, x + r, y + r], fill=parameters.color)
            return
        self.draw.line(points, fill=parameters.color, width=width, joint='curve')

    def draw_shape(self, box: BoundingBox, parameters: RenderingParameters):
        self.draw.rectangle(
            [box.x, box.y, box.x_max, box.y_max],
            fill=parameters.rect_color,
            outline=parameters.color,
            width=max(1, int(round(parameters.width))),
        )

    def draw_bounding_box(self, box: BoundingBox, parameters: RenderingParameters):
        self.draw.rectangle(
            [box.x, box.y, box.x_max, box.y_max],
            fill=parameters.rect_color,
            outline=parameters.color,
            width=1,
        )

    def save(self, path: Union[str, Path]):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path)


# =============================================================================
# Matplotlib
# =============================================================================

def _mpl_color(color: Color) -> Tuple[float, float, float, float]:
    return tuple(c / 255.0 for c in color)


class MatplotlibDrawingContext(DrawingContext):
    """Draw onto a matplotlib Axes."""

    def __init__(self, ax):
        self.ax = ax

    def draw_stroke(self, stroke: Stroke, parameters: RenderingParameters):
        if stroke.num_points == 0:
            return
        self.ax.plot(
            stroke.points[:, 0], stroke.points[:, 1],
            color=_mpl_color(parameters.color),
            linewidth=parameters.width,
            solid_capstyle='round',
            marker='o' if stroke.num_points == 1 else None,
        )

    def _add_rectangle(self, box: BoundingBox, parameters: RenderingParameters, linewidth: float):
        self.ax.add_patch(mpatches.Rectangle(
            (box.x, box.y), box.width, box.height,
            facecolor=_mpl_color(parameters.rect_color),
            edgecolor=_mpl_color(parameters.color),
            linewidth=linewidth,
        ))

    def draw_shape(self, box: BoundingBox, parameters: RenderingParameters):
        self._add_rectangle(box, parameters, linewidth=parameters.width)

    def draw_bounding_box(self, box: BoundingBox, parameters: RenderingParameters):
        self._add_rectangle(box, parameters, linewidth=1.0)


# =============================================================================
# Recording
# =============================================================================

class DrawCall(NamedTuple):
    """One recorded draw call."""
    kind: str  # 'stroke', 'shape' or 'box'
    target: Any  # Stroke or BoundingBox
    parameters: RenderingParameters


class RecordingDrawingContext(DrawingContext):
    """Keeps every draw call in order instead of drawing."""

    def __init__(self):
        self.calls: List[DrawCall] = []

    def draw_stroke(self, stroke: Stroke, parameters: RenderingParameters):
        self.calls.append(DrawCall('stroke', stroke, parameters))

    def draw_shape(self, box: BoundingBox, parameters: RenderingParameters):
        self.calls.append(DrawCall('shape', box, parameters))

    def draw_bounding_box(self, box: BoundingBox, parameters: RenderingParameters):
        self.calls.append(DrawCall('box', box, parameters))

    @property
    def kinds(self) -> List[str]:
        return [call.kind for call in self.calls]

    def clear(self):
        self.calls.clear()
