# src/color_palette_resolver/demo.py
import argparse
import json
import logging
import sys

DEFAULT_KEY = "HTML4"


def _parse_sample(text):
    """'0,0.5,1' -> [0.0, 0.5, 1.0]"""
    try:
        return [float(x) for x in text.split(",")]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected R,G,B floats, got {text!r}") from e


def _rows(colors):
    return [{"name": c.name, "rgb": [round(v, 4) for v in c.rgb]} for c in colors]


def build_parser():
    parser = argparse.ArgumentParser(
        prog="palette-resolve",
        description="Resolve color names or RGB samples against named color palettes.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List palettes with size and source")

    p_show = sub.add_parser("show", help="Print every color of a palette")
    p_show.add_argument("key", nargs="?", default=DEFAULT_KEY)

    p_names = sub.add_parser("names", help="Resolve color names (e.g. names HTML4 blue RED)")
    p_names.add_argument("key")
    p_names.add_argument("queries", nargs="+")

    p_colors = sub.add_parser("colors", help="Resolve RGB samples (e.g. colors HTML4 0,0.5,1)")
    p_colors.add_argument("key")
    p_colors.add_argument("samples", nargs="+", type=_parse_sample)
    p_colors.add_argument("--metric", default=None, help="Color difference metric (default CIE94:2)")
    return parser


def main(argv=None):
    """CLI demo: list palettes, or resolve names / RGB samples, printed as JSON."""
    from .resolution.errors import PaletteError
    from .resolution.orchestrator import default_resolver

    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        resolver = default_resolver()
        if args.command == "list":
            result = [s._asdict() for s in resolver.describe()]
        elif args.command == "show":
            result = _rows(resolver.get_palette(args.key))
        elif args.command == "names":
            result = _rows(resolver.resolve_names(args.key, args.queries))
        else:
            result = _rows(resolver.resolve_colors(args.key, args.samples, args.metric))
    except PaletteError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
