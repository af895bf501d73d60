import asyncio
import logging
import typer

from ..core.config import TORTOISE_ORM_CONFIG
from ..core.logging_config import configure_logging
from ..features.transactions.models import Transaction
from .commands.data import data_app
from .commands.reports import reports_app
from .database import DBConnection

configure_logging()
logger = logging.getLogger(__name__)

logger.info("Database connection: %s", TORTOISE_ORM_CONFIG["connections"]["default"])


app = typer.Typer(name="salesboard-cli", help="CLI for managing Salesboard data and reports.")
app.add_typer(data_app)
app.add_typer(reports_app)


@app.command("test-db-connection")
def test_db_connection_command_sync():
    """Tests the database connection and shows the first transaction."""
    asyncio.run(test_db_connection_command())

async def test_db_connection_command():
    async with DBConnection():
        typer.echo("Successfully connected to the database.")
        total = await Transaction.all().count()
        typer.echo(f"Found {total} transaction(s) in the database.")
        if total > 0:
            first = await Transaction.all().order_by("id").first()
            typer.echo(f"First transaction: {first}")

if __name__ == "__main__":
    app()
