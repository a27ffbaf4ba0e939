#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction for the chromepdf CLI.

Rendering and connection flags are generated from the option dataclasses:
each field becomes a ``--kebab-case`` flag whose help text comes from the
field metadata. Flags default to ``argparse.SUPPRESS`` so that only values
given on the command line override configuration files and the environment.
"""

from __future__ import annotations

import argparse
import types
from dataclasses import fields
from typing import Any, Dict, Type, Union, get_args, get_origin, get_type_hints

from chromepdf import __version__
from chromepdf.exceptions import ApiError, ConfigurationError, EncodingError, FileError, ValidationError
from chromepdf.options import ConnectionOptions, PdfOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_API_ERROR = 7
EXIT_ENCODING_ERROR = 8
EXIT_INTERRUPTED = 130


def snake_to_kebab(name: str) -> str:
    """Convert a snake_case field name to a kebab-case flag name."""
    return name.replace("_", "-")


def _unwrap_optional(hint: Any) -> tuple[Any, bool]:
    """Return the non-None member of an ``X | None`` hint and whether it was optional."""
    if get_origin(hint) in (Union, types.UnionType):
        members = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return members[0], len(members) != len(get_args(hint))
    return hint, False


def get_argument_kwargs(field: Any, hint: Any) -> Dict[str, Any]:
    """Build ``add_argument`` keyword arguments for one dataclass field.

    Parameters
    ----------
    field : dataclasses.Field
        Field to expose
    hint : Any
        Resolved type hint of the field

    Returns
    -------
    dict
        Keyword arguments, including the flag names under ``"flags"``

    """
    metadata = field.metadata
    flag = f"--{snake_to_kebab(field.name)}"
    kwargs: Dict[str, Any] = {
        "dest": field.name,
        "default": argparse.SUPPRESS,
        "help": metadata.get("help", f"Configure {field.name}"),
    }

    base_type, optional = _unwrap_optional(hint)

    if base_type is bool:
        if optional:
            # Tri-state: unset, --flag or --no-flag
            kwargs["action"] = argparse.BooleanOptionalAction
        elif field.default is True:
            flag = f"--no-{snake_to_kebab(field.name)}"
            kwargs["action"] = "store_false"
            kwargs["help"] = f"Disable: {kwargs['help']}"
        else:
            kwargs["action"] = "store_true"
    elif field.name == "margin":
        kwargs["nargs"] = "+"
        kwargs["metavar"] = "LENGTH"
    else:
        value_type = metadata.get("type", base_type if base_type in (int, float) else str)
        kwargs["type"] = value_type
        if "choices" in metadata:
            kwargs["choices"] = metadata["choices"]

    kwargs["flags"] = [flag]
    return kwargs


def add_options_class_arguments(
    parser: argparse.ArgumentParser, options_class: Type[Any], title: str, description: str | None = None
) -> argparse._ArgumentGroup:
    """Add one flag per field of ``options_class`` to a new argument group."""
    group = parser.add_argument_group(title, description)
    hints = get_type_hints(options_class)
    for field in fields(options_class):
        kwargs = get_argument_kwargs(field, hints[field.name])
        flags = kwargs.pop("flags")
        group.add_argument(*flags, **kwargs)
    return group


def map_args_to_config(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Collect explicitly given option flags into a configuration mapping.

    Returns
    -------
    dict
        Connection keys at the top level and rendering options under ``pdf``

    """
    values = vars(parsed_args)
    config: Dict[str, Any] = {name: values[name] for name in ConnectionOptions.field_names() if name in values}
    pdf = {name: values[name] for name in PdfOptions.field_names() if name in values}
    if pdf:
        config["pdf"] = pdf
    return config


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the chromepdf CLI.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="chromepdf",
        description="Render HTML, local files or web pages to PDF through a Browserless-compatible service.",
        epilog=(
            "Connection settings can also come from CHROMEPDF_API_KEY, CHROMEPDF_API_URL, "
            "CHROMEPDF_TIMEOUT and CHROMEPDF_USER_AGENT, or from a .chromepdf.toml file."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    source = parser.add_argument_group("Input")
    source_choice = source.add_mutually_exclusive_group(required=True)
    source_choice.add_argument("--url", help="Render the page at this URL")
    source_choice.add_argument("--file", help="Render a local HTML file ('-' reads HTML from stdin)")
    source_choice.add_argument("--html", help="Render this HTML string")

    output = parser.add_argument_group("Output")
    output.add_argument("-o", "--output", help="Write the PDF to this path ('-' for stdout)")
    output.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the JSON request document instead of calling the service",
    )
    output.add_argument("--rich", action="store_true", help="Syntax-highlight --dry-run output using Rich")

    add_options_class_arguments(parser, PdfOptions, "PDF options")
    add_options_class_arguments(parser, ConnectionOptions, "Connection")

    general = parser.add_argument_group("General")
    general.add_argument("--config", help="Path to a configuration file (JSON, TOML or YAML)")
    general.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    general.add_argument("--log-file", help="Also write log output to this file")
    general.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    general.add_argument("--trace", action="store_true", help="Debug logging with timestamps and transport logs")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, ConfigurationError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ApiError):
        return EXIT_API_ERROR

    if isinstance(exception, EncodingError):
        return EXIT_ENCODING_ERROR

    return EXIT_ERROR
