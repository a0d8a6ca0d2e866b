"""
Math Renderer

Draws math recognition results onto a DrawingContext. Two entry points:

    draw_strokes_by_recognition_result
        Raw strokes minus scratched-out ink, plus optional per-stroke and
        global bounding boxes.

    draw_font_by_recognition_result
        Lays out the recognized tree, then walks it:
        - TerminalNode: one shape at its box
        - NonTerminalNode: delegates to the selected candidate, draws nothing itself
        - RuleNode: children in order, then its own box in diagnostic colors

The renderer keeps no per-call state, so one instance can serve any number
of contexts.
"""

import logging
from typing import Optional, Sequence

from ..data.ink import BoundingBox, RecognitionResult, Stroke
from ..errors import UnresolvedCandidateError, UnresolvedGeometryError, UnsupportedNodeKindError
from ..geometry import global_bounding_box
from ..model.layout import InkLayout
from ..model.math_tree import MathNode, NonTerminalNode, RuleNode, TerminalNode
from .context import DrawingContext
from .parameters import RenderingParameters
from .scratch_out import resolve_visible_strokes

logger = logging.getLogger(__name__)


class MathRenderer:
    """Render math ink and recognized math trees."""

    def __init__(self, layout=None):
        """
        Args:
            layout: Object with layout(node, components) -> BoundingBox.
                    Defaults to InkLayout().
        """
        self.layout = layout or InkLayout()

    # -------------------------------------------------------------------------
    # Ink pipeline
    # -------------------------------------------------------------------------

    def draw_strokes_by_recognition_result(
        self,
        strokes: Sequence[Stroke],
        recognition_result: RecognitionResult,
        parameters: RenderingParameters,
        context: DrawingContext
    ) -> Sequence[Stroke]:
        """
        Draw the strokes that survive the result's scratch-outs.

        Returns:
            The visible strokes
        """
        visible = resolve_visible_strokes(strokes, recognition_result.scratch_out_results)

        for stroke in visible:
            context.draw_stroke(stroke, parameters)
            stroke_box = stroke.bounding_box
            if parameters.show_bounding_boxes and stroke_box is not None:
                context.draw_bounding_box(stroke_box, parameters)

        if parameters.show_bounding_boxes:
            # None when no survivor has ink
            global_box = global_bounding_box(visible)
            if global_box is not None:
                context.draw_bounding_box(global_box, parameters)

        logger.debug("Drew %d of %d strokes", len(visible), len(strokes))
        return visible

    # -------------------------------------------------------------------------
    # Symbolic pipeline
    # -------------------------------------------------------------------------

    def draw_font_by_recognition_result(
        self,
        components: Sequence[Stroke],
        root_node: MathNode,
        parameters: RenderingParameters,
        context: DrawingContext
    ) -> BoundingBox:
        """
        Lay out and draw a recognized tree.

        The global box goes first so node overlays stay on top of it.

        Returns:
            Global bounding box computed by the layout
        """
        global_box = self.layout.layout(root_node, components)
        if parameters.show_bounding_boxes:
            context.draw_bounding_box(global_box, parameters)
        self.draw_node(root_node, parameters, context)
        return global_box

    def draw_node(self, node: MathNode, parameters: RenderingParameters, context: DrawingContext):
        """Draw node and its descendants."""
        if isinstance(node, TerminalNode):
            self._draw_terminal_node(node, parameters, context)
        elif isinstance(node, NonTerminalNode):
            self._draw_non_terminal_node(node, parameters, context)
        elif isinstance(node, RuleNode):
            self._draw_rule_node(node, parameters, context)
        else:
            raise UnsupportedNodeKindError(node)

    def _draw_terminal_node(self, node: TerminalNode, parameters: RenderingParameters,
                            context: DrawingContext):
        context.draw_shape(_require_box(node), parameters)

    def _draw_non_terminal_node(self, node: NonTerminalNode, parameters: RenderingParameters,
                                context: DrawingContext):
        # No box of its own, even with show_bounding_boxes
        candidate = node.selected_candidate
        if candidate is None:
            raise UnresolvedCandidateError(node)
        self.draw_node(candidate, parameters, context)

    def _draw_rule_node(self, node: RuleNode, parameters: RenderingParameters,
                        context: DrawingContext):
        for child in node.children:
            self.draw_node(child, parameters, context)

        if parameters.show_bounding_boxes:
            context.draw_bounding_box(_require_box(node), parameters.diagnostic())


def _require_box(node) -> BoundingBox:
    box: Optional[BoundingBox] = node.bounding_box
    if box is None:
        raise UnresolvedGeometryError(node)
    return box
