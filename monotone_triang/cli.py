"""
Command line entry point.

    monotone-triang triangulate -i in.poly -o out.tri
    monotone-triang generate --shape star --n 100 -o star_100.poly
    monotone-triang plot -i in.poly -o in.png
    monotone-triang bench --sizes 100 1000 --csv results.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .benchmark import run_benchmark, summarize
from .config import DEFAULT_CONFIG, TriangulationConfig
from .errors import TriangulationError
from .polyio import read_polygon, write_polygon, write_triangulation
from .shapes import SHAPES, make_shape
from .triangulate import triangulate_polygon

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _config_from_args(args) -> TriangulationConfig:
    return DEFAULT_CONFIG.with_overrides(
        normalize_winding=True if args.normalize_winding else None,
        tie_epsilon=args.tie_epsilon,
        check_visibility=False if args.no_visibility_check else None,
    )


def cmd_triangulate(args) -> int:
    vertices = read_polygon(args.input)
    n = len(vertices)

    start = time.perf_counter()
    result = triangulate_polygon(vertices, _config_from_args(args))
    end = time.perf_counter()

    elapsed_ms = (end - start) * 1000

    write_triangulation(vertices, result.triangles, args.output)
    print(f"monotone,vertices={n},triangles={len(result.triangles)},"
          f"pieces={len(result.pieces)},time_ms={elapsed_ms}")
    return 0


def cmd_generate(args) -> int:
    points = make_shape(args.shape, args.n, rotate=not args.no_rotate)
    write_polygon(points, args.output)
    print(f"Generated {args.shape} polygon with {len(points)} vertices in {args.output}")
    return 0


def cmd_plot(args) -> int:
    from . import plotting
    plotting.use_headless_backend()

    vertices = read_polygon(args.input)
    result = triangulate_polygon(vertices, _config_from_args(args))
    path = plotting.save_figure(vertices, result, args.output, dpi=args.dpi)
    print(f"Saved {path}")
    return 0


def cmd_bench(args) -> int:
    df = run_benchmark(args.sizes, shapes=args.shapes, runs=args.runs,
                       config=_config_from_args(args), csv_path=args.csv)
    summary = summarize(df)
    print(summary.to_string(index=False))
    if args.csv:
        print(f"\nRaw results written to {args.csv}")
    return 0


def _add_config_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument('--normalize-winding', action='store_true',
                   help='Accept clockwise input (reversed internally)')
    p.add_argument('--tie-epsilon', type=float, default=None,
                   help=f'Active-edge tie tolerance (default {DEFAULT_CONFIG.tie_epsilon})')
    p.add_argument('--no-visibility-check', action='store_true',
                   help='Skip the boundary scan in the monotone triangulator')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='monotone-triang',
                                     description='Monotone-decomposition polygon triangulation')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('triangulate', help='Triangulate a .poly file')
    p.add_argument('--input', '-i', required=True, type=Path, help='Input polygon file')
    p.add_argument('--output', '-o', required=True, type=Path, help='Output triangulation file')
    _add_config_flags(p)
    p.set_defaults(func=cmd_triangulate)

    p = sub.add_parser('generate', help='Write a generated polygon')
    p.add_argument('--shape', choices=sorted(SHAPES), default='random')
    p.add_argument('--n', type=int, required=True, help='Approximate vertex count')
    p.add_argument('--output', '-o', required=True, type=Path)
    p.add_argument('--no-rotate', action='store_true',
                   help='Keep axis-aligned coordinates (no general-position rotation)')
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser('plot', help='Draw pieces and triangles of a .poly file')
    p.add_argument('--input', '-i', required=True, type=Path)
    p.add_argument('--output', '-o', required=True, type=Path, help='Image file (png, pdf, ...)')
    p.add_argument('--dpi', type=int, default=150)
    _add_config_flags(p)
    p.set_defaults(func=cmd_plot)

    p = sub.add_parser('bench', help='Time the pipeline on generated shapes')
    p.add_argument('--sizes', nargs='+', type=int, default=[10, 50, 100, 500, 1000])
    p.add_argument('--shapes', nargs='+', choices=sorted(SHAPES), default=sorted(SHAPES))
    p.add_argument('--runs', type=_positive_int, default=3)
    p.add_argument('--csv', type=Path, default=None, help='Write raw timings here')
    _add_config_flags(p)
    p.set_defaults(func=cmd_bench)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        return args.func(args)
    except TriangulationError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
