"""Read-evaluate loop of the Kitchen Planner console."""
from typing import Optional, TextIO
import logging

from kitchen.events import console_observers
from kitchen.events.Event_Bus import EventBus
from kitchen.infra.Input_Scanner import InputScanner
from kitchen.infra.Output_Handler import OutputHandler
from kitchen.shell.registry import dispatch
from kitchen.shell.session import Session
from kitchen.utilities.config import DEFAULT_STORAGE, PROMPT
from kitchen.utilities.errors import (
    Aborted, EmptyInput, IllegalCommandCombination, InputExhausted, KitchenError
)

logger = logging.getLogger(__name__)


def build_session(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                  default_storage: Optional[str] = DEFAULT_STORAGE) -> Session:
    """Wire scanner, output, event bus and observers into a fresh session."""
    output = OutputHandler(stdout)
    scanner = InputScanner(stdin, output)
    bus = EventBus()
    console_observers.start(bus, output)
    session = Session(scanner, output, bus)
    if default_storage:
        storage = session.inventory.create_ingredient_storage(default_storage)
        if storage is not None:
            session.go_to(storage)
    return session


def prompt_for(session: Session) -> str:
    if session.active_storage is None:
        return PROMPT
    return f"[{session.active_storage.storage_name}] {PROMPT}"


def run_once(session: Session):
    '''Reads and executes one command line. Errors a user can recover from are reported here.'''
    try:
        command_input = session.scanner.fetch_command()
        dispatch(session, command_input)
    except InputExhausted:
        logger.info("End of input, leaving")
        session.terminate()
    except EmptyInput:
        pass
    except Aborted:
        session.output.print_output("Nothing to abort.")
    except IllegalCommandCombination as e:
        logger.warning(str(e))
        session.output.print_error(str(e))
        session.output.print_help_message(e.command.value)
    except KitchenError as e:
        logger.error(f"Command failed: {e}")
        session.output.print_error(str(e))


def run(session: Session):
    session.output.print_help_message()
    while session.running:
        session.output.print_prompt(prompt_for(session))
        run_once(session)
