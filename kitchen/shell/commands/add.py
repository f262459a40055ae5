"""add storage | add ingredient | add recipe"""
import logging

from pydantic import ValidationError

from kitchen.shell.router import CommandRouter, cancellable, require_argument, require_storage
from kitchen.utilities.constants import ValidCommand

router = CommandRouter(ValidCommand.ADD)
logger = logging.getLogger(__name__)


@router.subcommand("storage", "inventory")
@cancellable("add")
def add_storage(session, command_input):
    name = require_argument(session, command_input, "Please enter a name for the new storage:")
    storage = session.inventory.create_ingredient_storage(name)
    if storage is None:
        session.report(False, "add", f"storage '{name}' (already exists)")
        return
    if session.active_storage is None:
        session.go_to(storage)
    session.report(True, "add", storage.storage_name)


@router.subcommand("ingredient")
@cancellable("add")
def add_ingredient(session, command_input):
    storage = require_storage(session, "add")
    if storage is None:
        return
    name = require_argument(session, command_input, "Please enter a name for the ingredient:")
    ingredient = session.inventory.create_ingredient(name, session.scanner)
    stored = storage.add_ingredient(ingredient)
    session.report(True, "add", f"{stored} to {storage.storage_name}")


@router.subcommand("recipe")
@cancellable("add")
def add_recipe(session, command_input):
    try:
        recipe = session.recipes.construct_recipe(session.scanner, name=command_input.remainder)
    except ValidationError as e:
        logger.warning(f"Rejected recipe: {e}")
        reason = e.errors()[0]["msg"].removeprefix("Value error, ")
        session.report(False, "add", f"recipe ({reason})")
        return
    added = session.recipes.add_recipe(recipe)
    session.report(added, "add", recipe.name if added else f"recipe '{recipe.name}' (already exists)")
