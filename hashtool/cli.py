"""CLI for hashtool - single-shot hash commands for agent orchestrators.

Inputs come from environment variables, and exactly one line is written to
stdout: the JSON result, or the error message on failure.
"""

from __future__ import annotations

import logging
import sys

import click

from hashtool import __version__
from hashtool.algorithms import supported_algorithms
from hashtool.commands import (
    ALGO_INPUT,
    DATA_INPUT,
    EXPECTED_INPUT,
    ToolError,
    dispatch,
)
from hashtool.schemas import CommandName

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _emit(command: CommandName, inputs: dict[str, str]) -> None:
    """Run a command and write its single output line.

    Errors go to stdout as well, since the orchestrator only reads stdout.
    """
    try:
        line = dispatch(command.value, inputs)
    except ToolError as e:
        logger.info(f"{command.value} failed: {e}")
        click.echo(str(e))
        sys.exit(1)

    click.echo(line)


@click.group()
@click.version_option(version=__version__, prog_name="hashtool")
@click.option(
    "--log-level",
    envvar="HASHTOOL_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Log level for diagnostics written to stderr",
)
def main(log_level: str) -> None:
    """hashtool - Hash data for agent orchestrators.

    Named inputs are read from environment variables (DATA, ALGO, EXPECTED).
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@main.command("hash")
@click.option("--data", envvar=DATA_INPUT, default="", help="Data to hash [env: DATA]")
@click.option("--algo", envvar=ALGO_INPUT, default="", help="Hash algorithm (default sha256) [env: ALGO]")
def hash_command(data: str, algo: str) -> None:
    """Print the digest of DATA as JSON.

    \b
    Example:
        DATA=foo hashtool hash
        DATA=foo ALGO=md5 hashtool hash
    """
    _emit(CommandName.HASH, {DATA_INPUT: data, ALGO_INPUT: algo})


@main.command("verify")
@click.option("--data", envvar=DATA_INPUT, default="", help="Data to check [env: DATA]")
@click.option("--expected", envvar=EXPECTED_INPUT, default="", help="Expected hex digest [env: EXPECTED]")
@click.option("--algo", envvar=ALGO_INPUT, default="", help="Hash algorithm (default sha256) [env: ALGO]")
def verify_command(data: str, expected: str, algo: str) -> None:
    """Check DATA against an EXPECTED digest and print the result as JSON.

    \b
    Example:
        DATA=foo EXPECTED=acbd18db4cc2f85cedef654fccc4a4d8 ALGO=md5 hashtool verify
    """
    _emit(
        CommandName.VERIFY,
        {DATA_INPUT: data, EXPECTED_INPUT: expected, ALGO_INPUT: algo},
    )


@main.command()
def algorithms() -> None:
    """List supported hash algorithms."""
    for name in supported_algorithms():
        click.echo(name)


@main.command()
def mcp() -> None:
    """Run the MCP server on stdio.

    \b
    Configure in .mcp.json:
        {
            "mcpServers": {
                "hashtool": {
                    "command": "hashtool",
                    "args": ["mcp"]
                }
            }
        }
    """
    from mcp_hashtool.server import mcp as mcp_server
    mcp_server.run()


if __name__ == "__main__":
    main()
