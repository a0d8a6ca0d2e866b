"""
Tests for MathRenderer

Tests:
1. Ink pipeline: scratch-outs applied, per-stroke and global boxes
2. Terminal / NonTerminal / Rule draw calls
3. Diagnostic override does not leak into caller parameters
4. Global box drawn before the tree
5. Error cases: unknown node kind, missing candidate, missing geometry
"""

from ink_renderer.configs import render_defaults
from ink_renderer.data.ink import BoundingBox, InkRange, RecognitionResult, ScratchOutResult, Stroke
from ink_renderer.errors import (
    UnresolvedCandidateError,
    UnresolvedGeometryError,
    UnsupportedNodeKindError,
)
from ink_renderer.model.math_tree import MathNode, NonTerminalNode, RuleNode, TerminalNode
from ink_renderer.rendering.context import RecordingDrawingContext
from ink_renderer.rendering.math_renderer import MathRenderer
from ink_renderer.rendering.parameters import RenderingParameters


R1 = BoundingBox(0, 0, 10, 10)
R2 = BoundingBox(20, 0, 10, 10)
RULE_BOX = BoundingBox(0, 0, 30, 10)


def make_strokes():
    return [
        Stroke.from_list([[0, 0], [10, 10]]),
        Stroke.from_list([[20, 0], [30, 5]]),
        Stroke.from_list([[40, 0], [45, 20]]),
        Stroke.from_list([[60, 0], [70, 10]]),
    ]


def test_ink_pipeline_without_boxes():
    """One stroke call per visible stroke, nothing else."""
    print("\n" + "=" * 60)
    print("TEST: Ink Pipeline Without Boxes")
    print("=" * 60)

    strokes = make_strokes()
    result = RecognitionResult(scratch_out_results=[ScratchOutResult(
        erased_ink_ranges=[InkRange(3)], ink_ranges=[InkRange(1)]
    )])
    context = RecordingDrawingContext()
    params = RenderingParameters()

    visible = MathRenderer().draw_strokes_by_recognition_result(strokes, result, params, context)

    assert visible == [strokes[0], strokes[2]]
    assert context.kinds == ['stroke', 'stroke']
    assert [c.target for c in context.calls] == [strokes[0], strokes[2]]
    assert all(c.parameters is params for c in context.calls)
    print("  PASSED!")


def test_ink_pipeline_with_boxes():
    """Each stroke followed by its box, global union box last."""
    print("\n" + "=" * 60)
    print("TEST: Ink Pipeline With Boxes")
    print("=" * 60)

    strokes = make_strokes()
    result = RecognitionResult(scratch_out_results=[ScratchOutResult(ink_ranges=[InkRange(3)])])
    context = RecordingDrawingContext()
    params = RenderingParameters(show_bounding_boxes=True)

    MathRenderer().draw_strokes_by_recognition_result(strokes, result, params, context)

    assert context.kinds == ['stroke', 'box', 'stroke', 'box', 'stroke', 'box', 'box']
    assert context.calls[1].target == strokes[0].bounding_box
    assert context.calls[-1].target == BoundingBox(0, 0, 45, 20), f"Got {context.calls[-1].target}"
    print(f"  Calls: {context.kinds}")
    print("  PASSED!")


def test_ink_pipeline_everything_scratched():
    """No visible strokes: no global box either."""
    print("\n" + "=" * 60)
    print("TEST: Ink Pipeline, Everything Scratched")
    print("=" * 60)

    strokes = make_strokes()[:2]
    result = RecognitionResult(scratch_out_results=[ScratchOutResult(
        erased_ink_ranges=[InkRange(1)], ink_ranges=[InkRange(0)]
    )])
    context = RecordingDrawingContext()

    visible = MathRenderer().draw_strokes_by_recognition_result(
        strokes, result, RenderingParameters(show_bounding_boxes=True), context
    )
    assert visible == []
    assert context.calls == []
    print("  PASSED!")


def test_ink_pipeline_empty_stroke():
    """Empty strokes are drawn (as nothing) but get no box of their own."""
    print("\n" + "=" * 60)
    print("TEST: Ink Pipeline, Empty Stroke")
    print("=" * 60)

    strokes = [
        Stroke.from_list([[100, 100], [120, 110]]),
        Stroke.from_list([]),
        Stroke.from_list([[130, 100], [140, 120]]),
    ]
    context = RecordingDrawingContext()

    MathRenderer().draw_strokes_by_recognition_result(
        strokes, RecognitionResult(), RenderingParameters(show_bounding_boxes=True), context
    )
    assert context.kinds == ['stroke', 'box', 'stroke', 'stroke', 'box', 'box'], context.kinds
    boxes = [c.target for c in context.calls if c.kind == 'box']
    assert boxes == [
        BoundingBox(100, 100, 20, 10),
        BoundingBox(130, 100, 10, 20),
        BoundingBox(100, 100, 40, 20),
    ], f"Got {boxes}"

    # Only empty survivors: strokes drawn, no boxes at all
    context.clear()
    MathRenderer().draw_strokes_by_recognition_result(
        [Stroke.from_list([])], RecognitionResult(),
        RenderingParameters(show_bounding_boxes=True), context
    )
    assert context.kinds == ['stroke']
    print("  PASSED!")


def test_terminal_node():
    """Terminal: one shape at its box with the caller's parameters."""
    print("\n" + "=" * 60)
    print("TEST: Terminal Node")
    print("=" * 60)

    params = RenderingParameters(show_bounding_boxes=True)
    context = RecordingDrawingContext()
    MathRenderer().draw_node(TerminalNode(label="x", bounding_box=R1), params, context)

    assert context.kinds == ['shape']
    assert context.calls[0].target == R1
    assert context.calls[0].parameters is params
    print("  PASSED!")


def test_non_terminal_node_forwards():
    """NonTerminal draws exactly what its candidate draws, never a box."""
    print("\n" + "=" * 60)
    print("TEST: NonTerminal Node Forwards")
    print("=" * 60)

    for show in (False, True):
        params = RenderingParameters(show_bounding_boxes=show)
        node = NonTerminalNode(
            name="term",
            candidates=[TerminalNode(label="x", bounding_box=R1),
                        TerminalNode(label="y", bounding_box=R2)],
            selected_index=1,
        )
        context = RecordingDrawingContext()
        MathRenderer().draw_node(node, params, context)

        assert context.kinds == ['shape'], f"show={show}: {context.kinds}"
        assert context.calls[0].target == R2
        print(f"  show_bounding_boxes={show}: {context.kinds}")

    print("  PASSED!")


def test_rule_node_draw_order():
    """Rule([T(r1), T(r2)]) with boxes: shape(r1), shape(r2), box(rule)."""
    print("\n" + "=" * 60)
    print("TEST: Rule Node Draw Order")
    print("=" * 60)

    params = RenderingParameters(show_bounding_boxes=True)
    node = RuleNode(
        name="horizontal",
        children=[TerminalNode(label="a", bounding_box=R1),
                  TerminalNode(label="b", bounding_box=R2)],
        bounding_box=RULE_BOX,
    )
    context = RecordingDrawingContext()
    MathRenderer().draw_node(node, params, context)

    assert context.kinds == ['shape', 'shape', 'box']
    assert [c.target for c in context.calls] == [R1, R2, RULE_BOX]

    box_params = context.calls[2].parameters
    assert box_params.color != params.color
    assert box_params.color == render_defaults.DIAGNOSTIC_COLOR
    assert box_params.rect_color == render_defaults.DIAGNOSTIC_RECT_COLOR
    print("  PASSED!")


def test_rule_node_without_boxes():
    """Without diagnostics a rule draws only its children."""
    print("\n" + "=" * 60)
    print("TEST: Rule Node Without Boxes")
    print("=" * 60)

    node = RuleNode(children=[TerminalNode(bounding_box=R1)], bounding_box=R1)
    context = RecordingDrawingContext()
    MathRenderer().draw_node(node, RenderingParameters(), context)

    assert context.kinds == ['shape']
    print("  PASSED!")


def test_diagnostic_override_does_not_leak():
    """Siblings and parents after a rule keep the caller's parameters."""
    print("\n" + "=" * 60)
    print("TEST: Diagnostic Override Does Not Leak")
    print("=" * 60)

    params = RenderingParameters(show_bounding_boxes=True, color=(0, 0, 0, 255))
    inner = RuleNode(children=[TerminalNode(bounding_box=R1)], bounding_box=R1)
    root = RuleNode(
        children=[inner, TerminalNode(bounding_box=R2)],
        bounding_box=RULE_BOX,
    )
    context = RecordingDrawingContext()
    MathRenderer().draw_node(root, params, context)

    assert context.kinds == ['shape', 'box', 'shape', 'box']
    # Sibling drawn after the inner rule's overlay
    assert context.calls[2].parameters is params
    assert params.color == (0, 0, 0, 255)
    assert params.rect_color == render_defaults.DEFAULT_RECT_COLOR
    print("  PASSED!")


def test_font_pipeline_global_box_first():
    """Layout runs, global box drawn before the tree."""
    print("\n" + "=" * 60)
    print("TEST: Font Pipeline, Global Box First")
    print("=" * 60)

    strokes = make_strokes()
    root = NonTerminalNode(candidates=[RuleNode(children=[
        TerminalNode(label="a", ink_ranges=[InkRange(0)]),
        TerminalNode(label="b", ink_ranges=[InkRange(1)]),
    ])])
    params = RenderingParameters(show_bounding_boxes=True)
    context = RecordingDrawingContext()

    box = MathRenderer().draw_font_by_recognition_result(strokes, root, params, context)

    assert box == BoundingBox(0, 0, 30, 10), f"Got {box}"
    assert context.kinds == ['box', 'shape', 'shape', 'box']
    assert context.calls[0].target == box
    assert context.calls[0].parameters is params
    assert context.calls[1].target == strokes[0].bounding_box
    print(f"  Calls: {context.kinds}")
    print("  PASSED!")


def test_font_pipeline_terminal_root():
    """A lone terminal with boxes on: global box + one shape."""
    print("\n" + "=" * 60)
    print("TEST: Font Pipeline, Terminal Root")
    print("=" * 60)

    strokes = make_strokes()
    root = TerminalNode(label="x", ink_ranges=[InkRange(2)])

    context = RecordingDrawingContext()
    MathRenderer().draw_font_by_recognition_result(
        strokes, root, RenderingParameters(show_bounding_boxes=True), context
    )
    assert context.kinds == ['box', 'shape']

    context = RecordingDrawingContext()
    MathRenderer().draw_font_by_recognition_result(strokes, root, RenderingParameters(), context)
    assert context.kinds == ['shape']
    print("  PASSED!")


def test_custom_layout():
    """Any object with layout(node, components) can drive the renderer."""
    print("\n" + "=" * 60)
    print("TEST: Custom Layout")
    print("=" * 60)

    class FixedLayout:
        def __init__(self):
            self.calls = 0

        def layout(self, node, components):
            self.calls += 1
            return RULE_BOX

    layout = FixedLayout()
    context = RecordingDrawingContext()
    box = MathRenderer(layout=layout).draw_font_by_recognition_result(
        [], TerminalNode(bounding_box=R1), RenderingParameters(show_bounding_boxes=True), context
    )

    assert layout.calls == 1
    assert box == RULE_BOX
    assert [c.target for c in context.calls] == [RULE_BOX, R1]
    print("  PASSED!")


def test_unsupported_node_kind():
    """Nodes outside the closed set raise."""
    print("\n" + "=" * 60)
    print("TEST: Unsupported Node Kind")
    print("=" * 60)

    class MatrixNode(MathNode):
        pass

    for node in (MatrixNode(name="matrix"), "x", None):
        try:
            MathRenderer().draw_node(node, RenderingParameters(), RecordingDrawingContext())
        except UnsupportedNodeKindError as e:
            print(f"  {e}")
        else:
            raise AssertionError(f"{node!r} should have been rejected")

    # Nested inside a rule: children before it are drawn, then the error
    context = RecordingDrawingContext()
    root = RuleNode(children=[TerminalNode(bounding_box=R1), MatrixNode()], bounding_box=R1)
    try:
        MathRenderer().draw_node(root, RenderingParameters(), context)
    except UnsupportedNodeKindError:
        pass
    else:
        raise AssertionError("Nested unsupported node should raise")
    assert context.kinds == ['shape']
    print("  PASSED!")


def test_unresolved_candidate():
    """A non-terminal without a selected candidate raises."""
    print("\n" + "=" * 60)
    print("TEST: Unresolved Candidate")
    print("=" * 60)

    for node in (NonTerminalNode(name="empty"),
                 NonTerminalNode(candidates=[TerminalNode(bounding_box=R1)], selected_index=3),
                 NonTerminalNode(candidates=[TerminalNode(bounding_box=R1)], selected_index=-1)):
        try:
            MathRenderer().draw_node(node, RenderingParameters(), RecordingDrawingContext())
        except UnresolvedCandidateError as e:
            assert e.node is node
            print(f"  {e}")
        else:
            raise AssertionError("Missing candidate should raise")

    print("  PASSED!")


def test_unresolved_geometry():
    """Drawing before layout raises instead of drawing at nowhere."""
    print("\n" + "=" * 60)
    print("TEST: Unresolved Geometry")
    print("=" * 60)

    try:
        MathRenderer().draw_node(TerminalNode(label="x"), RenderingParameters(), RecordingDrawingContext())
    except UnresolvedGeometryError as e:
        print(f"  {e}")
    else:
        raise AssertionError("Terminal without box should raise")

    # Rule boxes only matter with diagnostics on
    node = RuleNode(children=[TerminalNode(bounding_box=R1)])
    MathRenderer().draw_node(node, RenderingParameters(), RecordingDrawingContext())
    try:
        MathRenderer().draw_node(node, RenderingParameters(show_bounding_boxes=True),
                                 RecordingDrawingContext())
    except UnresolvedGeometryError:
        pass
    else:
        raise AssertionError("Rule without box should raise when drawing its overlay")

    print("  PASSED!")


def run_all_tests():
    """Run all tests."""
    print("\n" + "=" * 60)
    print("MATH RENDERER TEST SUITE")
    print("=" * 60)

    tests = [
        test_ink_pipeline_without_boxes,
        test_ink_pipeline_with_boxes,
        test_ink_pipeline_everything_scratched,
        test_ink_pipeline_empty_stroke,
        test_terminal_node,
        test_non_terminal_node_forwards,
        test_rule_node_draw_order,
        test_rule_node_without_boxes,
        test_diagnostic_override_does_not_leak,
        test_font_pipeline_global_box_first,
        test_font_pipeline_terminal_root,
        test_custom_layout,
        test_unsupported_node_kind,
        test_unresolved_candidate,
        test_unresolved_geometry,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"\n  FAILED: {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    print("\n" + "=" * 60)
    print(f"RESULTS: {passed} passed, {failed} failed")
    print("=" * 60)

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    exit(0 if success else 1)
