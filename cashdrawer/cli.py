"""CLI entry point for cashdrawer."""

import typer

from cashdrawer.commands.change import change_command
from cashdrawer.commands.till import init_command, set_command, show_command
from cashdrawer.logging_setup import setup_logging

app = typer.Typer(
    name="cashdrawer",
    help="Make change from a cash drawer",
    add_completion=False,
)

till_app = typer.Typer(help="View and edit the saved till.")
app.add_typer(till_app, name="till")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each step of making change"),
) -> None:
    """Make change from a cash drawer."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the config file with an empty till."""
    init_command(force)


@app.command()
def change(
    price: str = typer.Argument(..., help="Price of the purchase (in $)"),
    cash: str = typer.Argument(..., help="Cash tendered (in $)"),
    till_file: str = typer.Option(None, "--till", help="TOML file with a [till] table (default: saved till)"),
    apply: bool = typer.Option(False, "--apply", help="Save the till left after paying out"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Work out the change for a purchase."""
    change_command(price, cash, till_file, apply, as_json)


@till_app.command(name="show")
def show() -> None:
    """Show the saved till."""
    show_command()


@till_app.command(name="set")
def set_amount(
    denomination: str = typer.Argument(..., help="Denomination, e.g. QUARTER or 'ONE HUNDRED'"),
    amount: str = typer.Argument(..., help="Total held in that denomination (in $)"),
) -> None:
    """Set how much the till holds in one denomination."""
    set_command(denomination, amount)


if __name__ == "__main__":
    app()
