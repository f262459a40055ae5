"""Dispatch table: one router per command word."""
from typing import Dict
import logging

from kitchen.shell.commands import add, clear, find, go, listing, remove, stats, system
from kitchen.shell.router import CommandRouter
from kitchen.utilities.constants import ValidCommand

logger = logging.getLogger(__name__)

COMMAND_ROUTERS: Dict[ValidCommand, CommandRouter] = {
    router.command: router
    for router in (
        add.router,
        remove.router,
        find.router,
        listing.router,
        clear.router,
        go.router,
        stats.router,
        system.help_router,
        system.exit_router,
        system.unknown_router,
    )
}


def dispatch(session, command_input):
    '''
    Runs the handler for a parsed command line. IllegalCommandCombination
    raised by the router is left to the caller.
    '''
    logger.debug(f"Dispatching {command_input}")
    COMMAND_ROUTERS[command_input.command].dispatch(session, command_input)
