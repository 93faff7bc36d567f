"""Calculator commands with undo/redo history."""

import json
from typing import Optional

import click

from behavioral.models.calculator import SessionSummary


def _render_summary(summary: SessionSummary, title: str) -> None:
    from behavioral.cli.output import print_summary, print_table

    rows = [
        (index, f"{step.operator.value} {step.operand}", step.value)
        for index, step in enumerate(summary.steps, start=1)
    ]
    print_table(title, ["#", "Operation", "Value"], rows)
    print_summary(
        "Result",
        {
            "Value": summary.value,
            "Applied commands": f"{summary.cursor}/{summary.history_length}",
            "Redo available": summary.redo_available,
        },
    )


def _report(result, as_json: bool, title: str) -> None:
    from behavioral.cli.helpers import exit_with_error, handle_result

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.success:
            raise SystemExit(1)
        return

    if not result.success:
        partial = result.metadata.get("summary")
        if partial is not None and partial.steps:
            _render_summary(partial, f"{title} (stopped)")
        exit_with_error(result.error or "Unknown error")

    _render_summary(handle_result(result), title)


def _use_json(as_json: bool) -> bool:
    from behavioral.config import get_config

    return as_json or get_config().output_format == "json"


@click.group()
def calc() -> None:
    """Reversible calculator with multi-level undo and redo."""
    pass


@calc.command("run", context_settings={"ignore_unknown_options": True})
@click.argument("instructions", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option(
    "--keep-redo-tail/--truncate",
    "keep_redo_tail",
    default=None,
    help="Keep undone commands when a new one is computed (default from config: truncate)",
)
def calc_run(instructions: tuple, as_json: bool, keep_redo_tail: Optional[bool]) -> None:
    """Run calculator INSTRUCTIONS in order.

    \b
    Instructions:
      +100  -50  *10  /2            compute with a symbol
      add:100 sub:50 mul:10 div:2   compute with a name
      undo:N  redo:N                undo or redo N levels

    Example: behavioral calc run +100 -50 *10 /2 undo:4 redo:3
    """
    from behavioral.config import get_config
    from behavioral.controllers.calculator import CalculatorController

    if keep_redo_tail is None:
        truncate = get_config().truncate_on_compute
    else:
        truncate = not keep_redo_tail

    controller = CalculatorController(truncate_on_compute=truncate)
    result = controller.run(list(instructions))
    _report(result, _use_json(as_json), "Calculation")


@calc.command("demo")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def calc_demo(as_json: bool) -> None:
    """Run the classic example: +100 -50 *10 /2, undo 4 levels, redo 3."""
    from behavioral.controllers.calculator import DEMO_INSTRUCTIONS, CalculatorController

    if not _use_json(as_json):
        click.echo(f"Instructions: {' '.join(DEMO_INSTRUCTIONS)}")

    controller = CalculatorController()
    result = controller.demo()
    _report(result, _use_json(as_json), "Command pattern demo")
