"""Tests for the Typer command-line interface."""

from __future__ import annotations

import json
from datetime import date, timedelta

from typer.testing import CliRunner

from foodsaver.cli import app
from foodsaver.db.food_items import create_food_item
from foodsaver.db.users import create_user

runner = CliRunner()


def _user_with_item(name: str, expires_in: int) -> str:
    user = create_user(
        email="cli@foodsaver.io",
        password="secret1",
        name="Cli User",
        user_type="household",
    )
    create_food_item(
        user.id,
        name=name,
        category="vegetables",
        quantity=1,
        unit="pcs",
        purchase_date=date.today(),
        expiration_date=date.today() + timedelta(days=expires_in),
        storage_location="counter",
    )
    return user.id


def test_init_db_seeds_catalogue():
    result = runner.invoke(app, ["init-db"])
    assert result.exit_code == 0, result.output
    assert "Seeded 4 recipe(s) and 12 food bank(s)." in result.output

    again = runner.invoke(app, ["init-db"])
    assert "Seeded 0 recipe(s) and 0 food bank(s)." in again.output


def test_expiring_alerts_prints_json():
    user_id = _user_with_item("Spinach", 1)

    result = runner.invoke(app, ["expiring-alerts"])

    assert result.exit_code == 0, result.output
    alerts = json.loads(result.stdout)
    assert [alert["user_id"] for alert in alerts] == [user_id]
    assert alerts[0]["items"][0]["name"] == "Spinach"


def test_recommend_for_user():
    _user_with_item("Lettuce", 5)

    result = runner.invoke(app, ["recommend", "cli@foodsaver.io", "--limit", "1"])

    assert result.exit_code == 0, result.output
    recommendations = json.loads(result.stdout)
    assert [entry["name"] for entry in recommendations] == ["Fresh Garden Salad"]


def test_recommend_unknown_user_fails():
    result = runner.invoke(app, ["recommend", "ghost@foodsaver.io"])

    assert result.exit_code == 1
