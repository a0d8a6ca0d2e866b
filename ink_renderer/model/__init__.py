"""
Math Tree Package

Modules:
    - math_tree: Terminal / NonTerminal / Rule nodes and JSON parsing
    - layout: Bottom-up bounding box layout from ink
"""

from .math_tree import (
    MathNode,
    TerminalNode,
    NonTerminalNode,
    RuleNode,
    math_node_from_dict,
)
from .layout import InkLayout

__all__ = [
    # Tree
    'MathNode',
    'TerminalNode',
    'NonTerminalNode',
    'RuleNode',
    'math_node_from_dict',
    # Layout
    'InkLayout',
]
