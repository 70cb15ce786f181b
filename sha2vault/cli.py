"""sha2vault CLI: hash a string or a file, or run the self-test.

Exactly one input source is accepted per invocation:

- ``--string TEXT`` hashes the encoded text
- ``--path FILE`` hashes the raw bytes of a file
- ``--test`` runs the known-answer and reference self-test

The digest is printed as one line of lowercase hex on stdout; logs go to
stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import structlog

from sha2vault import __version__
from sha2vault.config import LOG_LEVELS, Sha2Config, load_config
from sha2vault.core_crypto.sha2 import compute_digest
from sha2vault.core_crypto.state import ConfigurationError, Variant
from sha2vault.selftest import run_self_test

NO_INPUT_MESSAGE = "no text provided!"


def configure_logging(level: str) -> None:
    """Configure structlog once at CLI entry."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@click.command()
@click.version_option(version=__version__, prog_name="sha2vault")
@click.option("--string", "text", default=None, help="Hash this text.")
@click.option(
    "--path",
    "path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Hash the contents of this file.",
)
@click.option("--test", "test", is_flag=True, help="Run the self-test.")
@click.option(
    "--variant",
    default=None,
    type=click.Choice(["224", "256"]),
    help="Digest size in bits (default from config: 256).",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TOML configuration file.",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(sorted(LOG_LEVELS), case_sensitive=False),
    help="Log level (default from config: warning).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    text: str | None,
    path: Path | None,
    test: bool,
    variant: str | None,
    config_path: Path | None,
    log_level: str | None,
) -> None:
    """SHA-224 / SHA-256 implemented from scratch."""
    # Config loading logs too, so start from the built-in level
    configure_logging(log_level or Sha2Config.log_level)
    try:
        config = load_config(config_path)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc
    if log_level is None:
        configure_logging(config.log_level)
    logger = structlog.get_logger()

    sources = [text is not None, path is not None, test]
    if sources.count(True) != 1:
        click.echo(NO_INPUT_MESSAGE, err=True)
        ctx.exit(2)

    if test:
        results = run_self_test()
        for result in results:
            click.echo(str(result))
        failed = [result for result in results if not result.passed]
        click.echo(f"{len(results) - len(failed)}/{len(results)} passed")
        ctx.exit(1 if failed else 0)

    selected = Variant.coerce(variant) if variant else config.default_variant

    if text is not None:
        try:
            data = text.encode(config.encoding)
        except UnicodeEncodeError as exc:
            raise click.BadParameter(str(exc), param_hint="--string") from exc
    else:
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise click.FileError(str(path), hint=exc.strerror) from exc

    logger.debug("hashing_input", variant=selected.value, size=len(data))
    click.echo(compute_digest(data, selected).hex())
