"""Per-command subcommand routing.

A CommandRouter maps the subcommands of one command word to handler
functions taking (session, command_input). A missing subcommand shows the
command's help; an undeclared one raises IllegalCommandCombination.
"""
from __future__ import annotations
from functools import wraps
from typing import Callable, Dict, Optional
import logging

from kitchen.utilities.constants import ValidCommand
from kitchen.utilities.errors import Aborted, IllegalCommandCombination

logger = logging.getLogger(__name__)

Handler = Callable[["Session", "CommandInput"], None]

__all__ = ["CommandRouter", "cancellable", "require_argument", "require_storage"]


class CommandRouter:
    def __init__(self, command: ValidCommand):
        self.command = command
        self.routes: Dict[str, Handler] = {}
        self.default: Optional[Handler] = None
        self.fallback: Optional[Handler] = None

    def subcommand(self, *names: str):
        def decorator(func: Handler) -> Handler:
            for name in names:
                self.routes[name.lower()] = func
            return func
        return decorator

    def on_empty(self, func: Handler) -> Handler:
        '''Handler used when the command comes without a subcommand.'''
        self.default = func
        return func

    def on_any(self, func: Handler) -> Handler:
        '''Handler used for every subcommand not declared with subcommand().'''
        self.fallback = func
        return func

    def dispatch(self, session, command_input):
        if not command_input.has_subcommand():
            if self.default is not None:
                return self.default(session, command_input)
            session.output.print_help_message(self.command.value)
            return None
        handler = self.routes.get(command_input.subcommand, self.fallback)
        if handler is None:
            raise IllegalCommandCombination(self.command, command_input.subcommand)
        logger.debug(f"{self.command.value} {command_input.subcommand} -> {handler.__name__}")
        return handler(session, command_input)


def cancellable(verb: str):
    """Turn an abort during a multi-step handler into a cancellation report."""
    def decorator(func: Handler) -> Handler:
        @wraps(func)
        def wrapper(session, command_input):
            try:
                return func(session, command_input)
            except Aborted:
                logger.info(f"'{verb}' cancelled by the user")
                session.report(False, verb, "cancelled by user")
                return None
        return wrapper
    return decorator


def require_argument(session, command_input, prompt: str) -> str:
    '''The remainder of the command line, or a name asked for interactively.'''
    if command_input.has_remainder():
        return command_input.remainder.strip()
    session.output.print_input_prompt(prompt)
    return session.scanner.collect_valid_string()


def require_storage(session, verb: str):
    if session.active_storage is None:
        session.report(False, verb, "no storage selected (use 'add storage' or 'go storage')")
    return session.active_storage
