#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the chromepdf rendering client.

Examples
--------
Render a web page::

    $ chromepdf --url https://example.com -o example.pdf

Render a local file in landscape with 1cm/2cm margins::

    $ chromepdf --file report.html --landscape --margin 1cm 2cm -o report.pdf

Inspect the request document without calling the service::

    $ chromepdf --html "<p>hi</p>" --dry-run

Render HTML piped on stdin to stdout::

    $ cat page.html | chromepdf --file - -o - > page.pdf

Use environment variables for connection defaults::

    $ export CHROMEPDF_API_KEY=...
    $ export CHROMEPDF_API_URL=http://localhost:3000
    $ chromepdf --url https://example.com -o out.pdf

"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from chromepdf.cli.builder import (
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
    map_args_to_config,
)
from chromepdf.client import BrowserlessClient
from chromepdf.config import load_config, merge_configs, resolve_options
from chromepdf.exceptions import ChromePdfError
from chromepdf.logging_utils import configure_logging
from chromepdf.options import ConnectionOptions, PdfOptions
from chromepdf.payload import RenderTarget, assemble_payload, encode_payload
from chromepdf.utils.io_utils import read_text_file, write_content

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace or parsed_args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_input_html(parsed_args: argparse.Namespace) -> str:
    """Return the HTML given via --html, --file or stdin (``--file -``)."""
    if parsed_args.file == "-":
        return sys.stdin.read()
    if parsed_args.file:
        return read_text_file(parsed_args.file)
    return parsed_args.html


def _print_payload(options: PdfOptions, parsed_args: argparse.Namespace) -> None:
    """Print the request document the render would send."""
    if parsed_args.url:
        target = RenderTarget.from_url(parsed_args.url)
    else:
        target = RenderTarget.from_html(_read_input_html(parsed_args))

    # Encoded exactly as a render would send it
    body = encode_payload(assemble_payload(options, target))
    document = json.dumps(json.loads(body), indent=2, ensure_ascii=False)

    if parsed_args.rich:
        from rich.console import Console
        from rich.syntax import Syntax

        Console().print(Syntax(document, "json", theme="monokai", word_wrap=True))
    else:
        print(document)


def _render(connection: ConnectionOptions, options: PdfOptions, parsed_args: argparse.Namespace) -> bytes:
    """Render the requested input through the service."""
    with BrowserlessClient(connection=connection, options=options) as client:
        if parsed_args.url:
            logger.info(f"Rendering URL: {parsed_args.url}")
            return client.render_url(parsed_args.url)
        if parsed_args.file and parsed_args.file != "-":
            logger.info(f"Rendering file: {parsed_args.file}")
            return client.render_file(parsed_args.file)
        logger.info("Rendering inline HTML")
        return client.render_content(_read_input_html(parsed_args))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chromepdf command line.

    Parameters
    ----------
    argv : sequence of str, optional
        Arguments to parse, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(argv)

    if not parsed_args.dry_run and not parsed_args.output:
        parser.print_usage(sys.stderr)
        print("chromepdf: error: -o/--output is required unless --dry-run is given", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    try:
        config = merge_configs(load_config(explicit_path=parsed_args.config), map_args_to_config(parsed_args))
        connection, options = resolve_options(config)

        if parsed_args.dry_run:
            _print_payload(options, parsed_args)
            return EXIT_SUCCESS

        pdf_bytes = _render(connection, options, parsed_args)

        if parsed_args.output == "-":
            write_content(pdf_bytes, sys.stdout.buffer)
            sys.stdout.buffer.flush()
        else:
            write_content(pdf_bytes, parsed_args.output)
            logger.info(f"PDF written to {parsed_args.output} ({len(pdf_bytes)} bytes)")

        return EXIT_SUCCESS

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return EXIT_INTERRUPTED

    except ChromePdfError as e:
        logger.error(e.message)
        return get_exit_code_for_exception(e)
