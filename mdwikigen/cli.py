"""Generate Markdown wiki pages from a library's type surface and XML doc comments.

The type surface is a YAML manifest describing the public types; the XML
documentation file produced by the compiler is read from the same location
(``MyLib.yml`` -> ``MyLib.xml``) unless ``--doc-xml`` points elsewhere.
"""

import argparse
import logging
from pathlib import Path

from mdwikigen.load_config import RENDER_STYLES
from mdwikigen.run_generation import run_generation


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    ap = argparse.ArgumentParser(
        description="Convert a type surface manifest and XML doc comments to wiki Markdown.",
    )
    ap.add_argument(
        "types",
        type=Path,
        help="YAML manifest describing the library's public types",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        nargs="?",
        default=Path("md"),
        help="Output directory for the generated pages (default: md)",
    )
    ap.add_argument(
        "namespace_match",
        nargs="?",
        default=None,
        help=(
            "Regex selecting documented namespaces; "
            "also decides which <see cref> links stay internal"
        ),
    )
    ap.add_argument(
        "--doc-xml",
        type=Path,
        default=None,
        help="XML documentation file (default: manifest path with .xml suffix)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--style",
        choices=RENDER_STYLES,
        default=None,
        help="Member rendering: collapsible details blocks or flat tables",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="List the pages that would be generated without writing files",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the generator."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
