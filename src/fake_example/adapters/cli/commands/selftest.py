"""``selftest``: run the registered smoke checks from an installed package."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import lib_log_rich.runtime
import orjson
import rich_click as click

from fake_example.domain.checks import CheckResult
from fake_example.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import command_scope, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def render_human(results: Sequence[CheckResult]) -> str:
    """One ``PASS``/``FAIL`` line per check, a blank line, then ``N/M checks passed``.

    Example:
        >>> print(render_human([CheckResult("check_example", True), CheckResult("other", False, "boom")]))
        PASS check_example
        FAIL other: boom
        <BLANKLINE>
        1/2 checks passed
    """
    lines = [f"{'PASS' if r.passed else 'FAIL'} {r.name}" + (f": {r.detail}" if r.detail else "") for r in results]
    passed = sum(r.passed for r in results)
    lines += ["", f"{passed}/{len(results)} checks passed"]
    return "\n".join(lines)


def render_json(results: Sequence[CheckResult]) -> str:
    """A JSON array of ``{"name", "passed", "detail"}`` objects, indented by two."""
    rows = [{"name": r.name, "passed": r.passed, "detail": r.detail} for r in results]
    return orjson.dumps(rows, option=orjson.OPT_INDENT_2).decode("utf-8")


@click.command("selftest", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Report as text lines or as JSON",
)
@click.pass_context
def cli_selftest(ctx: click.Context, output_format: str) -> None:
    """Run every registered smoke check and report each outcome.

    Exits 0 when all checks pass and 1 otherwise. An exception other than a
    failed assertion is a broken check and surfaces as an error.
    """
    fmt = OutputFormat(output_format.lower())
    services = get_cli_context(ctx).services

    with command_scope("selftest", format=fmt.value):
        results = services.run_checks()
        failed = [r.name for r in results if not r.passed]
        if lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.flush()
        click.echo(render_json(results) if fmt is OutputFormat.JSON else render_human(results))

        if failed:
            logger.error("Smoke checks failed: %s", ", ".join(failed))
            raise SystemExit(ExitCode.GENERAL_ERROR)
        logger.info("All %d smoke checks passed", len(results))


__all__ = ["cli_selftest", "render_human", "render_json"]
