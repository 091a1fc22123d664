"""Generate Markdown API reference pages from a symbol manifest and XML docs."""

import argparse
import logging
from pathlib import Path

from refdoc.run_generation import run_generation


def main(argv: list[str] | None = None) -> int:
    """Run the generation process."""
    ap = argparse.ArgumentParser(
        description=(
            "Generate Markdown reference pages from a symbol manifest and the "
            "compiler's XML documentation."
        ),
    )
    ap.add_argument(
        "manifest",
        type=Path,
        help="Symbol manifest YAML describing the assembly's public types",
    )
    ap.add_argument(
        "--xml",
        type=Path,
        help="XML documentation file (default: manifest path with .xml suffix)",
    )
    ap.add_argument(
        "--noxml",
        action="store_true",
        help="Ignore XML documentation; every description is a placeholder",
    )
    ap.add_argument(
        "--out",
        dest="out_dir",
        type=Path,
        default=Path("out"),
        help="Output directory (default: ./out)",
    )
    ap.add_argument(
        "--slim",
        action="store_true",
        help="Write every page into a single Markdown file",
    )
    ap.add_argument(
        "--mgspace",
        action="store_true",
        help="Add spacing between overloads on method group pages",
    )
    ap.add_argument(
        "--workers",
        type=int,
        help="Number of threads used to write pages (default from config)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
