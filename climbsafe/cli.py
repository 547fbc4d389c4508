"""
File: cli.py
Purpose: `flask guides ...` commands for schema setup and guide administration.
"""
import os

import click
from flask import current_app
from flask.cli import AppGroup

from climbsafe.config import db_config_from
from climbsafe.database.db_manager import DBManager

SCHEMA_PATH = os.path.join(os.path.dirname(__file__), 'database', 'schema.sql')

guides_cli = AppGroup('guides', help="Manage registered climbing guides.")


def _echo_result(result):
    click.echo(result['message'])
    if result['status'] != 'success':
        raise SystemExit(1)


@guides_cli.command('init-db')
def init_db():
    """Creates the guides table in the configured MySQL database."""
    config = current_app.config
    db = DBManager(db_config_from(config), pool_size=int(config['DB_POOL_SIZE']))
    count = db.execute_sql_script(SCHEMA_PATH)
    click.echo(f"Executed {count} statements from {SCHEMA_PATH}")


@guides_cli.command('list')
def list_guides():
    guides = current_app.guide_service.list_guides()
    if not guides:
        click.echo("No guides registered.")
        return
    for guide in guides:
        click.echo(f"{guide['email']}\t{guide['name']}\t{guide['emergencyContact']}")


@guides_cli.command('register')
@click.argument('email')
@click.argument('password')
@click.argument('first_name')
@click.argument('last_name')
@click.argument('emergency_contact')
def register(email, password, first_name, last_name, emergency_contact):
    _echo_result(current_app.guide_service.register_guide(
        email, password, first_name, last_name, emergency_contact))


@guides_cli.command('update')
@click.argument('email')
@click.argument('password')
@click.argument('first_name')
@click.argument('last_name')
@click.argument('emergency_contact')
def update(email, password, first_name, last_name, emergency_contact):
    _echo_result(current_app.guide_service.update_guide(
        email, password, first_name, last_name, emergency_contact))


@guides_cli.command('delete')
@click.argument('email')
def delete(email):
    _echo_result(current_app.guide_service.delete_guide(email))
