"""list storages | list ingredients | list expired | list recipes | list suggested"""
from kitchen.shell.router import CommandRouter, require_storage
from kitchen.utilities.constants import ValidCommand

router = CommandRouter(ValidCommand.LIST)


@router.subcommand("storages", "storage", "inventory")
def list_storages(session, command_input):
    names = []
    for storage in session.inventory.get_storages():
        marker = " (active)" if storage is session.active_storage else ""
        names.append(f"{storage.storage_name}{marker}")
    session.output.print_list("Storages:", names)


@router.subcommand("ingredients", "ingredient")
def list_ingredients(session, command_input):
    storage = require_storage(session, "list")
    if storage is not None:
        session.output.print_output(str(storage))


@router.subcommand("expired")
def list_expired(session, command_input):
    storage = require_storage(session, "list")
    if storage is not None:
        session.output.print_list(f"Expired in {storage.storage_name}:", storage.get_all_expired())


@router.subcommand("recipes", "recipe")
def list_recipes(session, command_input):
    session.output.print_list("Recipes:", (recipe.name for recipe in session.recipes.get_recipes()))


@router.subcommand("suggested", "possible")
def list_suggested(session, command_input):
    storage = require_storage(session, "list")
    if storage is None:
        return
    recipes = session.recipes.suggest_recipes(storage)
    session.output.print_list(f"Recipes you can make from {storage.storage_name}:",
                              (recipe.name for recipe in recipes))
