"""
Tree Layout

Computes node bounding boxes bottom-up from the ink each terminal covers:
- Terminal: union of its components' stroke boxes
- NonTerminal: box of the selected candidate
- Rule: union of its children's boxes

The renderer only reads these boxes; it never computes geometry itself.
Any object with a layout(node, components) -> BoundingBox method can replace
InkLayout.
"""

import logging
from typing import Sequence

from ..data.ink import BoundingBox, Stroke
from ..errors import UnresolvedCandidateError, UnresolvedGeometryError, UnsupportedNodeKindError
from ..geometry import union_box
from .math_tree import MathNode, NonTerminalNode, RuleNode, TerminalNode

logger = logging.getLogger(__name__)


class InkLayout:
    """Assign bounding boxes to a tree from the strokes it was recognized from."""

    def __init__(self, assign: bool = True):
        """
        Args:
            assign: Write computed boxes onto terminal and rule nodes.
                    If False, only the root box is returned.
        """
        self.assign = assign

    def layout(self, node: MathNode, components: Sequence[Stroke]) -> BoundingBox:
        """Return the global bounding box of node."""
        if isinstance(node, TerminalNode):
            return self._layout_terminal(node, components)
        elif isinstance(node, NonTerminalNode):
            candidate = node.selected_candidate
            if candidate is None:
                raise UnresolvedCandidateError(node)
            return self.layout(candidate, components)
        elif isinstance(node, RuleNode):
            box = union_box(self.layout(child, components) for child in node.children)
            if self.assign:
                node.bounding_box = box
            return box
        raise UnsupportedNodeKindError(node)

    def _layout_terminal(self, node: TerminalNode, components: Sequence[Stroke]) -> BoundingBox:
        if not node.ink_ranges:
            if node.bounding_box is None:
                raise ValueError(f"Terminal node '{node.name}' has no ink ranges and no bounding box")
            return node.bounding_box

        boxes = []
        for ink_range in node.ink_ranges:
            if not 0 <= ink_range.component < len(components):
                raise IndexError(
                    f"Terminal '{node.label}' references component {ink_range.component}, "
                    f"only {len(components)} available"
                )
            component_box = components[ink_range.component].bounding_box
            if component_box is not None:
                boxes.append(component_box)

        # Empty strokes have no box
        if not boxes:
            raise UnresolvedGeometryError(node, "all of its components are empty")
        box = union_box(boxes)
        logger.debug("Terminal '%s' laid out over %d components", node.label, len(boxes))
        if self.assign:
            node.bounding_box = box
        return box
