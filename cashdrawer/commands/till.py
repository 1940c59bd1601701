"""Till commands for initializing, viewing and editing the saved till."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cashdrawer.config import create_default_config, get_config_path, load_till, save_till
from cashdrawer.domain.ledger import Till
from cashdrawer.domain.models import Denomination, value_of
from cashdrawer.domain.money import format_money, to_cents

console = Console()


def read_till(config_path: Path) -> Till:
    """Load the saved till, exiting with a message if it can't be read."""
    try:
        return load_till(config_path)
    except FileNotFoundError:
        console.print("[red]Config not found. Run 'cashdrawer init' first.[/red]", style="bold")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Invalid till in {config_path}: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def render_till(till: Till, title: str = "Till") -> Table:
    """Build a table of till contents with a total row."""
    table = Table(title=title)
    table.add_column("Denomination", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Amount", justify="right", style="green")

    for denomination, cents in till:
        table.add_row(denomination.value, str(cents // value_of(denomination)), format_money(cents))

    table.add_section()
    table.add_row("[bold]Total[/bold]", "", f"[bold]{format_money(till.total())}[/bold]")
    return table


def init_command(force: bool = False) -> None:
    """Create the config file with an empty till."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        console.print("[dim]Use --force to overwrite it[/dim]")
        return

    create_default_config(config_path)
    console.print(f"[green]✓[/green] Config created at {config_path}")
    console.print("[dim]Fill the till with 'cashdrawer till set DENOMINATION AMOUNT'[/dim]")


def show_command() -> None:
    """Show the saved till."""
    till = read_till(get_config_path())
    console.print(render_till(till))


def set_command(denomination_name: str, amount: str) -> None:
    """Set the amount held in one denomination of the saved till."""
    config_path = get_config_path()
    till = read_till(config_path)

    try:
        denomination = Denomination.parse(denomination_name)
        cents = to_cents(amount)
        updated = till.set(denomination, cents)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    save_till(updated, config_path)
    console.print(f"[green]✓ {denomination.value} now holds {format_money(cents)}[/green]")
    console.print(f"[dim]Till total: {format_money(updated.total())}[/dim]")
