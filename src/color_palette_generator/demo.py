# src/color_palette_generator/demo.py
import argparse
import json
import logging
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpg-demo",
        description="Expand basic colors into a palette, or resolve a named color scheme.",
    )
    parser.add_argument(
        "colors",
        nargs="*",
        help="Basic colors (e.g. '#ff0000' 'rgb(0,255,0)' or '#f00;#0f0;#00f')",
    )
    parser.add_argument("--size", type=int, default=6, help="Palette size to generate")
    parser.add_argument(
        "--scheme",
        default=None,
        help="Resolve this scheme from the standard table instead of expanding colors",
    )
    parser.add_argument("--disabled", action="store_true", help="Use disabled colors")
    parser.add_argument(
        "--keys",
        default=None,
        help="Comma-separated series names; prints a color per name",
    )
    parser.add_argument("--html", action="store_true", help="Also print the HTML swatches")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def run(args: argparse.Namespace) -> dict:
    """Build the JSON-able result for parsed CLI arguments."""
    from .palette import ColorGeneratorFromBasicPalette, StandardColorGenerator
    from .palette.render import palette_as_html

    if args.scheme is not None or not args.colors:
        generator = StandardColorGenerator(args.scheme or "brewer.Paired")
        get = generator.get_disabled_scheme_colors if args.disabled else generator.get_scheme_colors
        result: dict = {"scheme": generator.main_scheme, "colors": get(generator.main_scheme, args.size)}
    else:
        generator = ColorGeneratorFromBasicPalette.from_value(args.colors)
        palette = generator.generate_palette_as_strings(args.size)
        result = {"basic": str(generator.basic_palette), "colors": palette}
        if args.html:
            result["html"] = palette_as_html(generator.generate_palette(args.size))

    if args.keys:
        keys = [k.strip() for k in args.keys.split(",") if k.strip()]
        build = generator.build_disabled_colors if args.disabled else generator.build_colors
        result["keys"] = build(keys)
    return result


def main(argv: list[str] | None = None) -> None:
    """CLI demo: expand a basic palette or resolve a scheme and print JSON."""
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = run(args)
    except (ValueError, LookupError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
