"""Command-line interface for svi."""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from collections.abc import Iterator
from typing import TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from svi.config import load_config, load_variables
from svi.errors import InterpolationError
from svi.interpolation import interpolate
from svi.models import DELIMITERS, DelimiterStyle
from svi.redaction import RedactingFilter, Redactor

console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    """Configure logging with the specified level.

    Args:
        level: Logging level string (debug, info, warning, error).
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@contextlib.contextmanager
def _redacted_logging(redactor: Redactor) -> Iterator[None]:
    """Mask substituted values in everything logged inside the block."""
    log_filter = RedactingFilter(redactor)
    handlers = list(logging.getLogger().handlers)
    for handler in handlers:
        handler.addFilter(log_filter)
    try:
        yield
    finally:
        for handler in handlers:
            handler.removeFilter(log_filter)


@click.group()
@click.option("--config", "-c", default=None, help="Path to svi.yaml config file")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """svi: interpolate variables into strings and redact them again."""
    ctx.ensure_object(dict)
    cfg = load_config(config)
    ctx.obj["config"] = cfg
    _setup_logging(cfg.logging.level)


@main.command()
@click.argument("template", type=click.File("r"))
@click.option(
    "--vars",
    "-v",
    "var_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file of variables; may be repeated, later files win",
)
@click.option("--env", is_flag=True, help="Also take variables from the environment")
@click.option(
    "--style",
    "-s",
    default=None,
    type=click.Choice([s.value for s in DelimiterStyle]),
    help="Override the configured delimiter style",
)
@click.option("--allow-missing", is_flag=True, help="Leave undefined variables in place")
@click.option("--redacted", is_flag=True, help="Write the output with values masked")
@click.option("--output", "-o", default="-", type=click.File("w"), help="Output file")
@click.pass_context
def render(
    ctx: click.Context,
    template: TextIO,
    var_files: tuple[str, ...],
    env: bool,
    style: str | None,
    allow_missing: bool,
    redacted: bool,
    output: TextIO,
) -> None:
    """Interpolate variables into TEMPLATE ('-' reads stdin)."""
    cfg = ctx.obj["config"]

    variables: dict[str, str] = {}
    for path in var_files:
        try:
            variables.update(load_variables(path))
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
    if env:
        variables.update(os.environ)

    try:
        result, replacers = interpolate(
            template.read(),
            variables,
            style or cfg.style,
            fail_on_missing=cfg.fail_on_missing and not allow_missing,
        )
    except InterpolationError as exc:
        raise click.ClickException(str(exc)) from exc

    redactor = Redactor(replacers, cfg.mask_format)
    with _redacted_logging(redactor):
        logger.info("Rendered template with %d variable(s)", len(replacers))
        output.write(redactor.redact(result) if redacted else result)


@main.command()
def styles() -> None:
    """List the supported delimiter styles."""
    table = Table(title="Delimiter Styles")
    table.add_column("Style", style="cyan")
    table.add_column("Opener", style="green")
    table.add_column("Closer", style="green")
    table.add_column("Escape", style="dim")
    for style, delimiters in DELIMITERS.items():
        table.add_row(
            style.value,
            escape(delimiters.opener),
            escape(delimiters.closer),
            escape(f"{delimiters.open_char * 3}x{delimiters.close_char * 3}"),
        )
    console.print(table)


if __name__ == "__main__":
    main()
