"""Change command for settling a purchase against the till."""

import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cashdrawer.commands.till import read_till, render_till
from cashdrawer.config import get_config_path, save_till
from cashdrawer.domain.models import Status
from cashdrawer.domain.money import format_money, to_cents
from cashdrawer.domain.settlement import ChangeResult, settle

console = Console()

STATUS_STYLES = {
    Status.OPEN: "green",
    Status.CLOSED: "yellow",
    Status.INSUFFICIENT_FUNDS: "red",
}


def render_change(result: ChangeResult) -> Table:
    """Build a table of the change handed over."""
    table = Table(title="Change")
    table.add_column("Denomination", style="cyan")
    table.add_column("Amount", justify="right", style="green")

    for denomination, amount in result.change:
        table.add_row(denomination.value, format_money(to_cents(amount)))

    table.add_section()
    table.add_row("[bold]Total[/bold]", f"[bold]{format_money(result.change_total())}[/bold]")
    return table


def change_command(
    price: str,
    cash: str,
    till_file: str | None = None,
    apply: bool = False,
    as_json: bool = False,
) -> None:
    """Compute change for a purchase.

    Args:
        price: Price in dollars.
        cash: Cash tendered in dollars.
        till_file: Optional TOML file with a [till] table to use instead of the saved till.
        apply: Write the till left after paying out back to the config.
        as_json: Print the result as JSON instead of tables.
    """
    try:
        price_cents = to_cents(price)
        cash_cents = to_cents(cash)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    if price_cents < 0 or cash_cents < 0:
        console.print("[red]Price and cash must not be negative[/red]")
        sys.exit(1)

    config_path = Path(till_file).expanduser() if till_file else get_config_path()
    till = read_till(config_path)

    settlement = settle(price, cash, till)
    result = settlement.result

    if as_json:
        console.print_json(json.dumps(result.as_dict()))
    else:
        style = STATUS_STYLES[result.status]
        console.print(f"Change due: {format_money(cash_cents - price_cents)}")
        console.print(f"Status: [{style}]{result.status.value}[/{style}]", style="bold")
        if result.change:
            console.print(render_change(result))

    if apply and result.status != Status.INSUFFICIENT_FUNDS:
        save_till(settlement.till, config_path)
        if not as_json:
            console.print(render_till(settlement.till, title="Till after change"))
            console.print(f"[green]✓[/green] Till saved to {config_path}")
