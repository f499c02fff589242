"""Tern CLI — render markdown files or stdin to HTML.

Entry point registered as ``tern`` in ``pyproject.toml``::

    [project.scripts]
    tern = "tern.cli:main"
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import tern
from tern.config import RenderConfig
from tern.errors import ConfigurationError

logger = logging.getLogger("tern.cli")


def _render(args: argparse.Namespace) -> None:
    from tern.markdown import COPY_SNIPPET, MarkdownRenderer

    if args.file is None or args.file == "-":
        source = sys.stdin.read()
    else:
        inpath = Path(args.file)
        if not inpath.is_file():
            print(f"error: {inpath} not found", file=sys.stderr)
            sys.exit(1)
        source = inpath.read_text(encoding="utf-8")

    overrides: dict[str, object] = {}
    if args.link_target is not None:
        overrides["link_target"] = args.link_target or None
    if args.copy_buttons:
        overrides["copy_buttons"] = True
    if args.max_length is not None:
        overrides["max_source_length"] = args.max_length

    try:
        config = replace(RenderConfig.from_env(), **overrides)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    html = MarkdownRenderer(config).render(source)
    if config.copy_buttons and args.with_script:
        html = f"{html}\n{COPY_SNIPPET}"

    if args.output:
        outpath = Path(args.output)
        outpath.write_text(html + "\n", encoding="utf-8")
        logger.info("Wrote %d chars to %s", len(html), outpath)
        print(f"written to {outpath} ({outpath.stat().st_size:,} bytes)", file=sys.stderr)
    else:
        sys.stdout.write(html + "\n")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``tern`` command."""
    parser = argparse.ArgumentParser(
        prog="tern",
        description="Tern — render lightweight markdown to HTML.",
    )
    parser.add_argument("--version", action="version", version=f"tern {tern.__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    subparsers = parser.add_subparsers(dest="command")

    # -- tern render ------------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render markdown to HTML")
    render_parser.add_argument(
        "file", nargs="?", default=None, help="Markdown file (default: stdin)"
    )
    render_parser.add_argument("-o", "--output", default=None, help="Write HTML to this file")
    render_parser.add_argument(
        "--copy-buttons",
        action="store_true",
        help="Add a copy button to every code block",
    )
    render_parser.add_argument(
        "--with-script",
        action="store_true",
        help="Append the copy-button click handler script (with --copy-buttons)",
    )
    render_parser.add_argument(
        "--link-target",
        default=None,
        help='Anchor target attribute (default: "_blank"; empty string omits it)',
    )
    render_parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Escape instead of parsing sources longer than this many characters",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "render":
        _render(args)
