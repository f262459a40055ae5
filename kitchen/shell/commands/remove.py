"""remove storage | remove ingredient | remove expired | remove recipe"""
from kitchen.shell.router import CommandRouter, cancellable, require_argument, require_storage
from kitchen.utilities.constants import ValidCommand

router = CommandRouter(ValidCommand.REMOVE)


@router.subcommand("storage", "inventory")
@cancellable("remove")
def remove_storage(session, command_input):
    name = require_argument(session, command_input, "Please enter the name of the storage to remove:")
    storage = session.inventory.remove_ingredient_storage(name)
    if storage is None:
        session.report(False, "remove", f"storage '{name}' (not found)")
        return
    session.forget(storage)
    session.report(True, "remove", storage.storage_name)


@router.subcommand("ingredient")
@cancellable("remove")
def remove_ingredient(session, command_input):
    storage = require_storage(session, "remove")
    if storage is None:
        return
    name = require_argument(session, command_input, "Please enter the name of the ingredient to remove:")
    lots = storage.find_ingredient(name)
    if not lots:
        session.report(False, "remove", f"{name} (not in {storage.storage_name})")
        return
    lot = lots[0]
    if len(lots) > 1:
        session.output.print_list(f"{name} is stored in several lots:",
                                  (f"{number}. {item}" for number, item in enumerate(lots, start=1)))
        session.output.print_input_prompt("Which lot should be removed (number)?")
        choice = session.scanner.collect_valid_integer()
        if not 1 <= choice <= len(lots):
            session.report(False, "remove", f"{name} (no lot number {choice})")
            return
        lot = lots[choice - 1]
    removed = storage.remove_ingredient(lot)
    session.report(removed, "remove", f"{lot} from {storage.storage_name}")


@router.subcommand("expired")
def remove_expired(session, command_input):
    storage = require_storage(session, "remove")
    if storage is None:
        return
    storage.remove_expired()


@router.subcommand("recipe")
@cancellable("remove")
def remove_recipe(session, command_input):
    name = require_argument(session, command_input, "Please enter the name of the recipe to remove:")
    recipe = session.recipes.remove_recipe(name)
    session.report(recipe is not None, "remove", recipe.name if recipe else f"recipe '{name}' (not found)")
