"""
CLI helpers: logging setup and command line reconstruction for report headers.
"""

import logging
from pathlib import Path

import click

PROGRAM_NAME = "swagger_codegen_kit"


def configure_logging(verbosity: int) -> None:
    """Map a -v count to a logging level (0: WARNING, 1: INFO, 2+: DEBUG)."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _format_value(value) -> str:
    # File paths are shown by name only
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct the invoking command line from the current Click context.

    Arguments come first, then options that differ from their defaults.
    Without an active context only the program name is returned.
    """
    try:
        cli_args = click.get_current_context().params
    except RuntimeError:
        return PROGRAM_NAME

    arguments = []
    options = []
    for param in click_command.params:
        value = cli_args.get(param.name)
        if value is None or value == () or value is False:
            continue

        if isinstance(param, click.Argument):
            arguments.append(_format_value(value))
        elif isinstance(param, click.Option):
            if value == param.default:
                continue
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.count:
                options.extend([flag] * value)
            elif param.is_flag:
                options.append(flag)
            elif param.multiple:
                for item in value:
                    options.extend([flag, _format_value(item)])
            else:
                options.extend([flag, _format_value(value)])

    return " ".join([PROGRAM_NAME] + arguments + options)
