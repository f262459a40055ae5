"""Console output collaborator: every line the interpreter shows goes through here."""
import sys
from typing import Iterable, Mapping, Optional, TextIO

from kitchen.utilities.constants import HELP_MESSAGES, PAST_TENSE


class OutputHandler:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def print_output(self, message: str = ""):
        print(message, file=self.stream)

    def print_prompt(self, prompt: str):
        print(prompt, end="", file=self.stream, flush=True)

    def print_input_prompt(self, message: str):
        print(f"  {message}", file=self.stream)

    def print_error(self, message: str):
        print(f"Error: {message}", file=self.stream)

    def print_operation_status(self, success: bool, verb: str, subject: str):
        if success:
            self.print_output(f"Successfully {PAST_TENSE.get(verb, verb)}: {subject}")
        else:
            self.print_output(f"Failed to {verb}: {subject}")

    def print_help_message(self, key: Optional[str] = None):
        self.print_output(HELP_MESSAGES.get(key or "general", HELP_MESSAGES["general"]))

    def print_list(self, title: str, items: Iterable, empty: str = "(Empty)"):
        lines = [str(item) for item in items]
        self.print_output(title)
        if not lines:
            self.print_output(f"\t{empty}")
        for line in lines:
            self.print_output(f"\t{line}")

    def print_stats(self, title: str, stats: Mapping[str, object]):
        self.print_output(title)
        for label, value in stats.items():
            self.print_output(f"\t{label.replace('_', ' ').capitalize()}: {value}")
