import asyncio
import typer

from ...core.config import SEED_DATA_URL
from ...core.exceptions import SeedSourceError, StoreError
from ...features.transactions.models import Transaction
from ...features.transactions.seed import seed_database
from ..database import DBConnection

data_app = typer.Typer(name="data", help="Import and inspect transaction data.")


@data_app.command("seed")
def seed_command(
    url: str = typer.Option(SEED_DATA_URL, help="URL of the JSON seed catalog."),
    replace: bool = typer.Option(False, "--replace", help="Delete existing transactions first."),
):
    """Imports the seed catalog into the database."""
    asyncio.run(_seed(url, replace))


async def _seed(url: str, replace: bool):
    async with DBConnection():
        typer.echo(f"Importing transactions from {url}...")
        try:
            imported = await seed_database(url, replace=replace)
        except SeedSourceError as e:
            typer.secho(f"Error: {e.message}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        except StoreError as e:
            typer.secho(f"Error writing to the database: {e.message}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        typer.secho(f"Imported {imported} transaction(s).", fg=typer.colors.GREEN)


@data_app.command("count")
def count_command():
    """Prints the number of stored transactions."""
    asyncio.run(_count())


async def _count():
    async with DBConnection():
        total = await Transaction.all().count()
        typer.echo(f"{total} transaction(s) in the database.")
