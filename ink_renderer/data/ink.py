"""
Ink Data Structures and Loaders

Raw pen input and the recognition-engine annotations that refer to it:
- Strokes (pen down to pen up) as numpy point arrays
- Axis-aligned bounding boxes with union/containment
- Ink ranges addressing strokes by component index
- Scratch-out results and the recognition result that carries them

Stroke identity is positional: a component index is the position of a stroke
in the sequence handed to the recognizer, not a stable ID.

Usage:
    from ink_renderer.data import load_strokes, RecognitionResult

    strokes = load_strokes("input.inkml")
    result = RecognitionResult.from_dict(engine_json)
    print(result.scratch_out_results)
"""

import json
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np


# =============================================================================
# Geometry
# =============================================================================

@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle (x, y is the top-left corner)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height

    def union(self, other: 'BoundingBox') -> 'BoundingBox':
        """Smallest box containing both boxes."""
        x_min = min(self.x, other.x)
        y_min = min(self.y, other.y)
        x_max = max(self.x_max, other.x_max)
        y_max = max(self.y_max, other.y_max)
        return BoundingBox(x_min, y_min, x_max - x_min, y_max - y_min)

    def contains(self, other: 'BoundingBox') -> bool:
        return (self.x <= other.x and self.y <= other.y and
                other.x_max <= self.x_max and other.y_max <= self.y_max)

    @classmethod
    def from_points(cls, points: np.ndarray) -> Optional['BoundingBox']:
        """Box around an [N, 2+] point array, None when there are no points."""
        if len(points) == 0:
            return None
        x_min, y_min = points[:, :2].min(axis=0)
        x_max, y_max = points[:, :2].max(axis=0)
        return cls(float(x_min), float(y_min),
                   float(x_max - x_min), float(y_max - y_min))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BoundingBox':
        return cls(
            x=float(data['x']),
            y=float(data['y']),
            width=float(data['width']),
            height=float(data['height']),
        )

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}


# =============================================================================
# Strokes
# =============================================================================

@dataclass(eq=False)
class Stroke:
    """A single stroke (pen down to pen up)."""
    points: np.ndarray  # [N, 2] or [N, 3] for (x, y) or (x, y, t)

    @property
    def num_points(self) -> int:
        return len(self.points)

    @property
    def bounding_box(self) -> Optional[BoundingBox]:
        """None for an empty stroke (no pen samples)."""
        return BoundingBox.from_points(self.points)

    @classmethod
    def from_list(cls, point_list: Sequence[Sequence[float]]) -> 'Stroke':
        """Create from [[x, y], [x, y], ...] format."""
        if len(point_list) == 0:
            return cls(points=np.zeros((0, 2), dtype=np.float32))
        return cls(points=np.asarray(point_list, dtype=np.float32))


# =============================================================================
# Recognition Annotations
# =============================================================================

@dataclass(frozen=True)
class InkRange:
    """Reference to (part of) one stroke of the original input."""
    component: int
    first_item: Optional[float] = None
    last_item: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InkRange':
        if 'component' not in data:
            raise ValueError(f"Ink range without component: {data}")
        return cls(
            component=int(data['component']),
            first_item=data.get('firstItem'),
            last_item=data.get('lastItem'),
        )


@dataclass
class ScratchOutResult:
    """
    Strokes recognized as scratched out.

    erased_ink_ranges are the strokes of the scratching gesture itself,
    ink_ranges the strokes it erased. Both disappear from the rendering.
    """
    erased_ink_ranges: List[InkRange] = field(default_factory=list)
    ink_ranges: List[InkRange] = field(default_factory=list)

    @property
    def components(self) -> List[int]:
        """All component indices referenced, erasing gesture first."""
        return ([r.component for r in self.erased_ink_ranges] +
                [r.component for r in self.ink_ranges])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScratchOutResult':
        return cls(
            erased_ink_ranges=[InkRange.from_dict(r) for r in data.get('erasedInkRanges') or []],
            ink_ranges=[InkRange.from_dict(r) for r in data.get('inkRanges') or []],
        )


@dataclass
class RecognitionResult:
    """Math recognition result: scratch-outs plus the recognized tree."""
    scratch_out_results: List[ScratchOutResult] = field(default_factory=list)
    root: Optional[Any] = None  # MathNode

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RecognitionResult':
        # Imported here to avoid a data <-> model import cycle
        from ..model.math_tree import math_node_from_dict

        root_data = data.get('result')
        return cls(
            scratch_out_results=[
                ScratchOutResult.from_dict(s) for s in data.get('scratchOutResults') or []
            ],
            root=math_node_from_dict(root_data) if root_data else None,
        )

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> 'RecognitionResult':
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Recognition result not found: {filepath}")
        with open(filepath, 'r', encoding='utf-8') as f:
            return cls.from_dict(json.load(f))


# =============================================================================
# Stroke Loaders
# =============================================================================

class InkMLStrokeParser:
    """Parse strokes out of InkML trace elements."""

    INKML_NS = {'inkml': 'http://www.w3.org/2003/InkML'}

    @classmethod
    def parse_file(cls, filepath: Union[str, Path]) -> List[Stroke]:
        filepath = Path(filepath)
        try:
            root = ET.parse(filepath).getroot()
        except ET.ParseError as e:
            raise ValueError(f"Failed to parse {filepath}: {e}")
        return cls.parse_root(root)

    @classmethod
    def parse_root(cls, root: ET.Element) -> List[Stroke]:
        traces = (root.findall('.//inkml:trace', cls.INKML_NS) or
                  root.findall('.//trace'))
        # Empty traces are kept so component indices still line up
        return [Stroke(points=cls._parse_trace_points(t.text or "")) for t in traces]

    @classmethod
    def _parse_trace_points(cls, trace_text: str) -> np.ndarray:
        points = []
        for point_str in trace_text.strip().split(','):
            parts = point_str.split()
            if len(parts) < 2:
                continue
            try:
                points.append([float(parts[0]), float(parts[1])])
            except ValueError:
                continue

        if not points:
            return np.zeros((0, 2), dtype=np.float32)
        return np.array(points, dtype=np.float32)


def load_strokes(filepath: Union[str, Path]) -> List[Stroke]:
    """
    Load strokes from a .json or .inkml file.

    JSON may be {"strokes": [[[x, y], ...], ...]} or the bare list.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Stroke file not found: {filepath}")

    if filepath.suffix.lower() == '.inkml':
        return InkMLStrokeParser.parse_file(filepath)

    with open(filepath, 'r', encoding='utf-8') as f:
        raw = json.load(f)
    if isinstance(raw, dict):
        raw = raw.get('strokes', [])
    if not isinstance(raw, list):
        raise ValueError(f"Expected a list of strokes in {filepath}")
    return [Stroke.from_list(points) for points in raw]
