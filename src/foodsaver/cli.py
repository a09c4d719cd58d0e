"""Command-line interface for FoodSaver."""

from __future__ import annotations

import json
from typing import Optional

import typer

from foodsaver.alerts import ExpirationAlertSweeper, collect_expiration_alerts
from foodsaver.db.food_banks import seed_food_banks
from foodsaver.db.food_items import list_available_ingredient_names
from foodsaver.db.recipes import list_recipes, seed_recipes
from foodsaver.db.repository import get_engine, session_scope
from foodsaver.db.users import get_user_by_email
from foodsaver.search import recommend_recipes

app = typer.Typer(help="FoodSaver inventory and waste-reduction commands.")


def _echo_json(payload: object, pretty: bool) -> None:
    if pretty:
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
    else:
        typer.echo(json.dumps(payload))


@app.command("init-db")
def init_db() -> None:
    """Create the database schema and seed the recipe catalogue and food-bank directory."""

    get_engine()
    with session_scope() as session:
        recipes_added = seed_recipes(session)
        banks_added = seed_food_banks(session)
    typer.echo(f"Seeded {recipes_added} recipe(s) and {banks_added} food bank(s).")


@app.command("expiring-alerts")
def expiring_alerts(
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """
    Run the expiration alert sweep once and print the alerts it raised.
    """

    alerts = collect_expiration_alerts()
    ExpirationAlertSweeper(collector=lambda: alerts).sweep_once()
    _echo_json([alert.model_dump(mode="json") for alert in alerts], pretty)


@app.command()
def recommend(
    email: str = typer.Argument(..., help="Email address of the account."),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Maximum recipes to show."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """Print recipe recommendations for a user's current inventory."""

    user = get_user_by_email(email)
    if user is None:
        typer.secho(f"No user registered with email {email}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    available = list_available_ingredient_names(user.id)
    recommendations = recommend_recipes(list_recipes(), available, limit=limit)
    _echo_json([entry.model_dump(mode="json") for entry in recommendations], pretty)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind."),
    port: Optional[int] = typer.Option(None, "--port", help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the API server with uvicorn."""

    from foodsaver.server.run import serve as run_server

    run_server(host, port, reload=reload)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``foodsaver`` console script."""
    app(prog_name="foodsaver", args=argv)


if __name__ == "__main__":
    main()
