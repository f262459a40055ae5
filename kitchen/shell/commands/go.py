"""go storage <name> | go back"""
from kitchen.shell.router import CommandRouter, cancellable, require_argument
from kitchen.utilities.constants import ValidCommand

router = CommandRouter(ValidCommand.GO)


@router.subcommand("storage", "inventory", "to")
@cancellable("go")
def go_to_storage(session, command_input):
    name = require_argument(session, command_input, "Please enter the name of the storage:")
    storage = session.inventory.get_storage(name)
    if storage is None:
        session.report(False, "go", f"storage '{name}' (not found)")
        return
    session.go_to(storage)
    session.report(True, "go", storage.storage_name)


@router.subcommand("back")
def go_back(session, command_input):
    storage = session.go_back()
    if storage is None:
        session.report(False, "go", "back (no previous storage)")
        return
    session.report(True, "go", storage.storage_name)
