"""clear storage | clear history"""
from kitchen.shell.router import CommandRouter, require_storage
from kitchen.utilities.constants import ValidCommand

router = CommandRouter(ValidCommand.CLEAR)


@router.subcommand("storage", "inventory")
def clear_storage(session, command_input):
    storage = require_storage(session, "clear")
    if storage is None:
        return
    count = storage.clear()
    session.report(True, "clear", f"{count} ingredient lot(s) from {storage.storage_name}")


@router.subcommand("history")
def clear_history(session, command_input):
    count = session.clear_history()
    session.report(True, "clear", f"{count} history entries")
