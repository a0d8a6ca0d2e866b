"""
Rendering errors.

All of these signal broken input contracts (bad recognizer output or a tree
built wrong). They are not recoverable while rendering and propagate to the
host unchanged; draw calls already issued are not rolled back.
"""


class RenderingError(Exception):
    """Base class for ink renderer errors."""


class MalformedScratchOutError(RenderingError, IndexError):
    """A scratch-out references a stroke index outside the input strokes."""

    def __init__(self, component: int, num_strokes: int):
        self.component = component
        self.num_strokes = num_strokes
        super().__init__(
            f"Scratch-out component {component} out of range [0, {num_strokes})"
        )


class UnsupportedNodeKindError(RenderingError, TypeError):
    """The tree holds a node that is not Terminal, NonTerminal or Rule."""

    def __init__(self, node):
        self.node = node
        super().__init__(f"Unsupported node kind: {type(node).__name__}")


class UnresolvedCandidateError(RenderingError, ValueError):
    """A non-terminal node has no selected candidate."""

    def __init__(self, node):
        self.node = node
        super().__init__(
            f"Non-terminal node '{node.name}' has no selected candidate "
            f"(index {node.selected_index} of {len(node.candidates)})"
        )


class UnresolvedGeometryError(RenderingError, ValueError):
    """A node has no bounding box where one is needed."""

    def __init__(self, node, reason: str = "run layout first"):
        self.node = node
        super().__init__(
            f"{type(node).__name__} '{node.name}' has no bounding box; {reason}"
        )
