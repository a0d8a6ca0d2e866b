"""
Render a Recognition Result

Usage:
    python -m ink_renderer.demos.render_recognition_result \\
        --strokes strokes.json --result result.json --output ink.png

    # Recognized tree instead of raw ink, with diagnostic boxes:
    python -m ink_renderer.demos.render_recognition_result \\
        --strokes strokes.inkml --result result.json --symbolic --show-boxes

    # matplotlib figure instead of a Pillow image:
    python -m ink_renderer.demos.render_recognition_result \\
        --strokes strokes.json --result result.json --backend matplotlib
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from ink_renderer.configs import render_defaults
from ink_renderer.data import RecognitionResult, load_strokes
from ink_renderer.rendering import (
    MathRenderer,
    MatplotlibDrawingContext,
    PILDrawingContext,
    RenderingParameters,
)


# =============================================================================
# Logging Setup
# =============================================================================

def setup_logging(log_file: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """Console logger plus optional file logger for the ink_renderer package."""
    logger = logging.getLogger('ink_renderer')
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s | %(message)s', datefmt='%H:%M:%S')

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    logger.propagate = False
    return logger


# =============================================================================
# Rendering
# =============================================================================

def render(args: argparse.Namespace, logger: logging.Logger) -> Path:
    strokes = load_strokes(args.strokes)
    result = RecognitionResult.from_file(args.result)
    logger.info(f"Loaded {len(strokes)} strokes, {len(result.scratch_out_results)} scratch-outs")

    parameters = RenderingParameters(
        show_bounding_boxes=args.show_boxes,
        color=args.color,
        width=args.width,
    )
    renderer = MathRenderer()

    output = Path(args.output)
    if args.backend == 'matplotlib':
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=(args.canvas_width / 100, args.canvas_height / 100))
        context = MatplotlibDrawingContext(ax)
    else:
        context = PILDrawingContext.new(args.canvas_width, args.canvas_height)

    if args.symbolic:
        if result.root is None:
            raise ValueError(f"{args.result} has no recognized tree ('result' key)")
        box = renderer.draw_font_by_recognition_result(strokes, result.root, parameters, context)
        logger.info(f"Tree global box: {box.to_dict()}")
    else:
        visible = renderer.draw_strokes_by_recognition_result(strokes, result, parameters, context)
        logger.info(f"Drew {len(visible)} visible strokes")

    if args.backend == 'matplotlib':
        ax.set_aspect('equal')
        ax.invert_yaxis()
        ax.axis('off')
        output.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output, dpi=100, bbox_inches='tight', facecolor='white')
        plt.close(fig)
    else:
        context.save(output)

    logger.info(f"Saved: {output}")
    return output


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render a math recognition result")
    parser.add_argument('--strokes', type=str, required=True,
                        help='Strokes file (.json or .inkml)')
    parser.add_argument('--result', type=str, required=True,
                        help='Recognition result JSON')
    parser.add_argument('--output', type=str,
                        default=str(render_defaults.OUTPUT_DIR / 'render.png'))
    parser.add_argument('--backend', choices=['pil', 'matplotlib'], default='pil')
    parser.add_argument('--symbolic', action='store_true',
                        help='Draw the recognized tree instead of the ink')
    parser.add_argument('--show-boxes', action='store_true',
                        help='Overlay diagnostic bounding boxes')
    parser.add_argument('--color', type=str, default='#1580cd')
    parser.add_argument('--width', type=float, default=render_defaults.DEFAULT_WIDTH)
    parser.add_argument('--canvas-width', type=int, default=render_defaults.DEFAULT_CANVAS_SIZE[0])
    parser.add_argument('--canvas-height', type=int, default=render_defaults.DEFAULT_CANVAS_SIZE[1])
    parser.add_argument('--log-file', type=str, default=None)
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)

    logger = setup_logging(args.log_file, args.verbose)
    render(args, logger)


if __name__ == "__main__":
    main()
