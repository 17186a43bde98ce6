"""cocoda-utils CLI — inspect hashes, IDs, dates and labels from the shell."""

import click
import yaml
from rich.console import Console
from rich.table import Table

from cocoda_utils import __version__
from cocoda_utils.options import Options, OptionsError, load_options
from cocoda_utils.utils import CocodaUtils

console = Console()


@click.group()
@click.version_option(version=__version__)
def main():
    """cocoda-utils — helpers for knowledge organization front-ends.

    Compute UI hashes and IDs, format dates, and preview how concept labels,
    notations and definitions resolve for a given language preference.
    """


# ── Hash / IDs ───────────────────────────────────────────────────────


@main.command(name="hash")
@click.argument("text")
def hash_command(text: str):
    """Print the FNV-1a hash of TEXT."""
    console.print(CocodaUtils.hash(text))


@main.command(name="generate-id")
@click.option("--count", "-n", default=1, type=click.IntRange(min=1), help="Number of IDs")
def generate_id_command(count: int):
    """Print one or more random IDs."""
    for _ in range(count):
        console.print(CocodaUtils.generate_id())


# ── Dates ────────────────────────────────────────────────────────────


@main.command(name="date")
@click.argument("value")
@click.option("--only-date", is_flag=True, help="Omit the time")
def date_command(value: str, only_date: bool):
    """Format an ISO 8601 date VALUE for the current locale."""
    console.print(CocodaUtils.date_to_string(value, only_date=only_date))


# ── Labels ───────────────────────────────────────────────────────────


@main.command()
@click.argument("items_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--language", "-l", default=None, help="Preferred language")
@click.option("--config", "-c", "config_path", default=None, help="Options YAML file")
@click.option("--adjust", is_flag=True, help="Apply scheme-specific notation padding")
def label(items_path: str, language: str | None, config_path: str | None, adjust: bool):
    """Show label, notation and definition for the items in ITEMS_PATH.

    ITEMS_PATH is a JSON or YAML file holding one item or a list of items.
    """
    try:
        options = load_options(config_path) if config_path else Options()
    except OptionsError as e:
        console.print(f"[red]Failed to load options:[/] {e}")
        return

    try:
        with open(items_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        console.print(f"[red]Failed to parse:[/] {e}")
        return

    items = data if isinstance(data, list) else [data]
    items = [item for item in items if isinstance(item, dict)]
    if not items:
        console.print("[yellow]No items found.[/]")
        return

    utils = CocodaUtils(options)
    table = Table(title=f"Items ({len(items)})")
    table.add_column("Notation", style="cyan")
    table.add_column("Label")
    table.add_column("Definition")
    table.add_column("Hash", style="dim")

    for item in items:
        table.add_row(
            utils.notation(item, adjust=adjust),
            utils.pref_label(item, language),
            "; ".join(utils.definition(item, language))[:60],
            utils.hash(item.get("uri", "")),
        )

    console.print(table)


if __name__ == "__main__":
    main()
