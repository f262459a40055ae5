"""find ingredient | find recipe"""
from kitchen.shell.router import CommandRouter, cancellable, require_argument, require_storage
from kitchen.utilities.constants import ValidCommand

router = CommandRouter(ValidCommand.FIND)


@router.subcommand("ingredient")
@cancellable("find")
def find_ingredient(session, command_input):
    storage = require_storage(session, "find")
    if storage is None:
        return
    name = require_argument(session, command_input, "Please enter the name of the ingredient:")
    lots = storage.find_ingredient(name)
    if not lots:
        session.report(False, "find", f"{name} in {storage.storage_name}")
        return
    session.output.print_list(f"{name} in {storage.storage_name}:", lots)


@router.subcommand("recipe")
@cancellable("find")
def find_recipe(session, command_input):
    name = require_argument(session, command_input, "Please enter the name of the recipe:")
    recipe = session.recipes.find_recipe(name)
    if recipe is None:
        session.report(False, "find", f"recipe '{name}'")
        return
    session.output.print_output(str(recipe))
