"""
Recognized Math Expression Tree

The recognizer returns a tree over three node kinds:
- TerminalNode: a leaf symbol backed by ink (e.g. "x", "2", "+")
- NonTerminalNode: a choice among recognition alternatives; one is selected
- RuleNode: a structural rule composing children (fraction, superscript, ...)

Bounding boxes are filled in by a layout pass (see layout.py) before drawing.

JSON shape (one node):
    {"type": "terminalNode", "name": "term", "selectedCandidate": 0,
     "candidates": [{"label": "x"}], "inkRanges": [{"component": 0}]}
    {"type": "nonTerminalNode", "name": "expression", "selectedCandidate": 0,
     "candidates": [<node>, ...]}
    {"type": "rule", "name": "fraction", "children": [<node>, ...]}
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..data.ink import BoundingBox, InkRange


@dataclass(eq=False)
class MathNode:
    """Base class for recognized tree nodes."""
    name: str = ""


@dataclass(eq=False)
class TerminalNode(MathNode):
    """Leaf symbol drawn as a single shape."""
    label: str = ""
    ink_ranges: List[InkRange] = field(default_factory=list)
    bounding_box: Optional[BoundingBox] = None


@dataclass(eq=False)
class NonTerminalNode(MathNode):
    """Selection among alternative sub-trees."""
    candidates: List[MathNode] = field(default_factory=list)
    selected_index: int = 0

    @property
    def selected_candidate(self) -> Optional[MathNode]:
        """The chosen alternative, or None if the index does not resolve."""
        if 0 <= self.selected_index < len(self.candidates):
            return self.candidates[self.selected_index]
        return None


@dataclass(eq=False)
class RuleNode(MathNode):
    """Structural rule over ordered children (e.g. numerator, denominator)."""
    children: List[MathNode] = field(default_factory=list)
    bounding_box: Optional[BoundingBox] = None


# =============================================================================
# Parsing
# =============================================================================

def _parse_bounding_box(data: Dict[str, Any]) -> Optional[BoundingBox]:
    box = data.get('boundingBox')
    return BoundingBox.from_dict(box) if box else None


def _parse_terminal(data: Dict[str, Any]) -> TerminalNode:
    candidates = data.get('candidates') or []
    selected = data.get('selectedCandidate', 0)
    label = ""
    if 0 <= selected < len(candidates):
        label = candidates[selected].get('label', "")

    return TerminalNode(
        name=data.get('name', ""),
        label=label,
        ink_ranges=[InkRange.from_dict(r) for r in data.get('inkRanges') or []],
        bounding_box=_parse_bounding_box(data),
    )


def _parse_non_terminal(data: Dict[str, Any]) -> NonTerminalNode:
    return NonTerminalNode(
        name=data.get('name', ""),
        candidates=[math_node_from_dict(c) for c in data.get('candidates') or []],
        selected_index=int(data.get('selectedCandidate', 0)),
    )


def _parse_rule(data: Dict[str, Any]) -> RuleNode:
    children = data.get('children') or []
    if not children:
        raise ValueError(f"Rule node '{data.get('name', '')}' has no children")
    return RuleNode(
        name=data.get('name', ""),
        children=[math_node_from_dict(c) for c in children],
        bounding_box=_parse_bounding_box(data),
    )


_NODE_PARSERS = {
    'terminalNode': _parse_terminal,
    'nonTerminalNode': _parse_non_terminal,
    'rule': _parse_rule,
}


def math_node_from_dict(data: Dict[str, Any]) -> MathNode:
    """Build a MathNode tree from the recognizer's JSON."""
    node_type = data.get('type')
    parser = _NODE_PARSERS.get(node_type)
    if parser is None:
        raise ValueError(f"Unknown node type: {node_type}. Available: {list(_NODE_PARSERS.keys())}")
    return parser(data)
