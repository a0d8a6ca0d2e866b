"""
Rendering Parameters

Immutable per draw call. Overrides (e.g. the rule-node diagnostic colors)
produce a derived copy, so the caller's instance never changes.
"""

import re
from dataclasses import dataclass, replace
from typing import Sequence, Tuple, Union

from PIL import ImageColor

from ..configs import render_defaults

Color = Tuple[int, int, int, int]


# CSS rgba() with a fractional alpha, which ImageColor rejects
_CSS_RGBA = re.compile(
    r'^rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d*\.\d+)\s*\)$', re.IGNORECASE
)


def _alpha_to_int(alpha: Union[int, float]) -> int:
    """Float alphas in [0, 1] are fractions; anything else is already 0-255."""
    if isinstance(alpha, float) and 0.0 <= alpha <= 1.0:
        return int(round(alpha * 255))
    return int(alpha)


def to_rgba(color: Union[str, Sequence[Union[int, float]]]) -> Color:
    """
    Normalize a color to an (r, g, b, a) tuple of ints.

    Accepts "red", "#1580cd", "rgba(255, 0, 0, 0.1)", (r, g, b) or
    (r, g, b, a). A float alpha such as 0.5 is read as a fraction of 255.
    """
    if isinstance(color, str):
        match = _CSS_RGBA.match(color.strip())
        if match:
            r, g, b, a = match.groups()
            color = (int(r), int(g), int(b), float(a))
        else:
            color = ImageColor.getrgb(color)
    if len(color) == 3:
        return (int(color[0]), int(color[1]), int(color[2]), 255)
    if len(color) == 4:
        return (int(color[0]), int(color[1]), int(color[2]), _alpha_to_int(color[3]))
    raise ValueError(f"Unknown color: {color}")


@dataclass(frozen=True)
class RenderingParameters:
    """Options read by the renderer and drawing backends."""
    show_bounding_boxes: bool = False
    color: Color = render_defaults.DEFAULT_COLOR
    rect_color: Color = render_defaults.DEFAULT_RECT_COLOR
    width: float = render_defaults.DEFAULT_WIDTH

    def __post_init__(self):
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, 'color', to_rgba(self.color))
        object.__setattr__(self, 'rect_color', to_rgba(self.rect_color))

    def derive(self, **changes) -> 'RenderingParameters':
        """Copy with the given fields overridden."""
        return replace(self, **changes)

    def diagnostic(self) -> 'RenderingParameters':
        """Copy used for structural overlays (rule node boxes)."""
        return self.derive(
            color=render_defaults.DIAGNOSTIC_COLOR,
            rect_color=render_defaults.DIAGNOSTIC_RECT_COLOR,
        )
