from __future__ import annotations

from typing import Optional

import typer

from ryandata_field_utils.validation.composites import available_rules, get_rule

app = typer.Typer(help="Check field values against ryandata_field_utils rules.")


@app.command()
def check(
    rule: str = typer.Argument(..., help="Registered rule name, e.g. string_rnie."),
    value: str = typer.Argument(..., help="Raw value to check ('' for an empty value)."),
    field: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--field",
        "-f",
        help="Field label used in the error message.",
    ),
    min_length: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--min-length",
        help="Minimum number of characters.",
    ),
    max_length: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--max-length",
        help="Maximum number of characters.",
    ),
    exact_length: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--exact-length",
        help="Exact number of characters (rules with an exact-length stage).",
    ),
) -> None:
    """Print the normalized value, or the failure message and exit 1."""
    try:
        compiled = get_rule(
            rule, min_length=min_length, max_length=max_length, exact_length=exact_length
        )
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    result = compiled.check(value, field)
    if result.failure is not None:
        typer.echo(f"{result.failure.kind.value}: {result.failure.message}")
        raise typer.Exit(code=1)
    typer.echo(str(result.value))


@app.command()
def rules() -> None:
    """List registered rule names."""
    for name in available_rules():
        typer.echo(name)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
