import logging
from collections.abc import Iterable
from typing import Annotated, Any

import srsly
import typer
from pydantic import BaseModel

from rangecomp.dispatch import (
    UnknownRelationError,
    parse_relation,
    relations_between,
)
from rangecomp.dispatch import query as run_query
from rangecomp.models import Interval
from rangecomp.notation import (
    IntervalSyntaxError,
    format_interval,
    parse_interval,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Compare intervals with Allen's interval relations.")


class BatchRow(BaseModel):
    left: str
    right: str
    relation: str


class _BatchRowError(Exception):
    def __init__(self, *, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(reason)


def _parse_interval_arg(value: str) -> Interval:
    """Parse interval notation. Raises typer.BadParameter on invalid input."""
    try:
        return parse_interval(value)
    except IntervalSyntaxError as err:
        raise typer.BadParameter(str(err)) from err


def _not_comparable(err: TypeError) -> typer.BadParameter:
    return typer.BadParameter(f"Intervals are not comparable: {err}")


def _evaluate_row(row: Any) -> dict[str, Any]:
    parsed = BatchRow.model_validate(row)
    result = run_query(
        parse_interval(parsed.left),
        parse_interval(parsed.right),
        parsed.relation,
    )
    return {**row, "result": result}


def _evaluate_rows(rows: Iterable[Any]) -> list[dict[str, Any]]:
    results: list[dict[str, Any]] = []
    for line_number, row in enumerate(rows, start=1):
        try:
            results.append(_evaluate_row(row))
        except (TypeError, ValueError) as err:
            raise _BatchRowError(
                line_number=line_number, reason=str(err)
            ) from err
    logger.debug("Evaluated %d batch rows", len(results))
    return results


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def relate(
    left: Annotated[str, typer.Argument(help="Left interval, e.g. '[1, 10)'")],
    right: Annotated[
        str, typer.Argument(help="Right interval, e.g. '[5, 15)'")
    ],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print a JSON object")
    ] = False,
) -> None:
    """Show the Allen relations that hold from LEFT to RIGHT."""
    left_interval = _parse_interval_arg(left)
    right_interval = _parse_interval_arg(right)
    try:
        found = relations_between(left_interval, right_interval)
    except TypeError as err:
        raise _not_comparable(err) from err
    names = [relation.value for relation in found]
    if as_json:
        typer.echo(
            srsly.json_dumps(
                {
                    "left": format_interval(left_interval),
                    "right": format_interval(right_interval),
                    "relations": names,
                }
            )
        )
        return
    for name in names:
        typer.echo(name)


@app.command()
def query(
    left: Annotated[str, typer.Argument(help="Left interval")],
    right: Annotated[str, typer.Argument(help="Right interval")],
    relation: Annotated[
        str, typer.Argument(help="Relation name, e.g. 'overlaps'")
    ],
) -> None:
    """Test a single named relation from LEFT to RIGHT."""
    left_interval = _parse_interval_arg(left)
    right_interval = _parse_interval_arg(right)
    try:
        parsed_relation = parse_relation(relation)
    except UnknownRelationError as err:
        raise typer.BadParameter(str(err), param_hint="RELATION") from err
    try:
        result = run_query(left_interval, right_interval, parsed_relation)
    except TypeError as err:
        raise _not_comparable(err) from err
    typer.echo("true" if result else "false")


@app.command()
def batch(
    input_path: Annotated[
        str, typer.Argument(help="Input JSONL file, or - for stdin")
    ],
    output_path: Annotated[
        str, typer.Argument(help="Output JSONL file, or - for stdout")
    ] = "-",
) -> None:
    """Evaluate JSONL rows of {left, right, relation} and add a result."""
    try:
        results = _evaluate_rows(srsly.read_jsonl(input_path))
    except _BatchRowError as err:
        typer.echo(f"Error: line {err.line_number}: {err.reason}", err=True)
        raise typer.Exit(1) from err
    except ValueError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    srsly.write_jsonl(output_path, results)
    if output_path != "-":
        typer.echo(f"Wrote {len(results)} rows to {output_path}")
