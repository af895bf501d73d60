import asyncio
import typer

from ...core.exceptions import InvalidMonth, StoreError
from ...features.reports.service import generate_combined_report
from ...features.transactions.store import get_record_store
from ..database import DBConnection

reports_app = typer.Typer(name="reports", help="Print monthly reports.")


@reports_app.command("combined")
def combined_report_command(
    month: int = typer.Option(..., "--month", "-m", help="Month of sale, 1-12."),
):
    """Prints statistics, bar chart and pie chart for a month as JSON."""
    asyncio.run(_combined_report(month))


async def _combined_report(month: int):
    async with DBConnection():
        try:
            report = await generate_combined_report(get_record_store(), month)
        except InvalidMonth as e:
            typer.secho(f"Error: {e.message}", fg=typer.colors.RED)
            raise typer.Exit(code=2)
        except StoreError as e:
            typer.secho(f"Error: {e.message}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        typer.echo(report.model_dump_json(by_alias=True, indent=2))
