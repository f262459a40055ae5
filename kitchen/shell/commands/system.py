"""help [command] | exit | unrecognized command words"""
from kitchen.shell.router import CommandRouter
from kitchen.utilities.constants import ValidCommand
from kitchen.utilities.errors import IllegalCommandCombination

help_router = CommandRouter(ValidCommand.HELP)
exit_router = CommandRouter(ValidCommand.EXIT)
unknown_router = CommandRouter(ValidCommand.UNKNOWN)


@help_router.on_empty
def general_help(session, command_input):
    session.output.print_help_message()


@help_router.on_any
def command_help(session, command_input):
    command = ValidCommand.find_command(command_input.subcommand)
    if command is ValidCommand.UNKNOWN:
        raise IllegalCommandCombination(ValidCommand.HELP, command_input.subcommand)
    session.output.print_help_message(command.value)


@exit_router.on_empty
@exit_router.on_any
def exit_application(session, command_input):
    session.output.print_output("Goodbye!")
    session.terminate()


@unknown_router.on_empty
@unknown_router.on_any
def unknown_command(session, command_input):
    session.output.print_error("Unknown command. Type 'help' to see the available commands.")
