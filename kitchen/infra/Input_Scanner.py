"""Line scanner: turns raw input lines into commands, numbers and unit inputs.

Every read yields a ScanResult tagged OK, INVALID, CANCELLED (the abort
sentinel) or EXHAUSTED (end of stream). The retrying collectors look at the
tag: INVALID re-prompts, CANCELLED and EXHAUSTED leave the loop at once. The
plain accessors (next_line, fetch_command, ...) unwrap the result, raising
the matching error from kitchen.utilities.errors.
"""
from __future__ import annotations
from enum import Enum
from typing import Any, Callable, NamedTuple, Optional, TextIO
import logging
import re
import sys

from kitchen.domain.Unit import UnitRegistry
from kitchen.infra.Output_Handler import OutputHandler
from kitchen.utilities.constants import ABORT_TOKEN, MAX_COMMAND_TOKENS, MAX_UNIT_TOKENS, ValidCommand
from kitchen.utilities.errors import (
    Aborted, EmptyInput, InputExhausted, MissingUnitTokens, NotANumber, UnknownUnit
)
from kitchen.utilities.validators import CommandInput, UnitInput

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"^[+-]?\d+$")
_DECIMAL = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


class ScanStatus(Enum):
    OK = "ok"
    INVALID = "invalid"
    CANCELLED = "cancelled"
    EXHAUSTED = "exhausted"


class ScanResult(NamedTuple):
    status: ScanStatus
    value: Any = None
    error: Optional[Exception] = None

    def unwrap(self):
        if self.status is ScanStatus.OK:
            return self.value
        if self.status is ScanStatus.CANCELLED:
            raise Aborted()
        if self.status is ScanStatus.EXHAUSTED:
            raise InputExhausted()
        raise self.error


def parse_integer(text: str) -> int:
    if not _INTEGER.match(text):
        raise NotANumber(text, "integer")
    return int(text)


def parse_float(text: str) -> float:
    '''Plain decimals only: no exponents, underscores, inf or nan.'''
    if not _DECIMAL.match(text):
        raise NotANumber(text, "number")
    return float(text)


def create_command_input(line: str) -> CommandInput:
    '''Splits a line into command word, subcommand and the untouched remainder.'''
    tokens = line.split(None, MAX_COMMAND_TOKENS - 1)
    command = tokens[0].lower() if tokens else None
    subcommand = tokens[1].lower() if len(tokens) > 1 else None
    remainder = tokens[2] if len(tokens) > 2 else None
    return CommandInput(command=ValidCommand.find_command(command), subcommand=subcommand, remainder=remainder)


def create_unit_input(line: str) -> UnitInput:
    tokens = line.split(None, MAX_UNIT_TOKENS - 1)
    if len(tokens) < MAX_UNIT_TOKENS:
        raise MissingUnitTokens()
    amount = parse_float(tokens[0])
    unit = UnitRegistry.find_unit(tokens[1])
    if unit is None:
        raise UnknownUnit(tokens[1])
    return UnitInput(amount=amount, unit=unit)


class InputScanner:
    def __init__(self, stream: Optional[TextIO] = None, output: Optional[OutputHandler] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.output = output if output is not None else OutputHandler()

    # --- Tagged reads -------------------------------------------------------
    def read(self) -> ScanResult:
        '''Reads one line and classifies it; never raises.'''
        raw = self.stream.readline()
        if raw == "":
            return ScanResult(ScanStatus.EXHAUSTED)
        line = raw.strip()
        if not line:
            return ScanResult(ScanStatus.INVALID, error=EmptyInput())
        if line.lower() == ABORT_TOKEN:
            logger.debug("Abort sentinel received")
            return ScanResult(ScanStatus.CANCELLED)
        return ScanResult(ScanStatus.OK, line)

    def scan(self, parser: Callable[[str], Any]) -> ScanResult:
        result = self.read()
        if result.status is not ScanStatus.OK:
            return result
        try:
            return ScanResult(ScanStatus.OK, parser(result.value))
        except ValueError as e:
            return ScanResult(ScanStatus.INVALID, error=e)

    # --- Raising accessors -------------------------------------------------
    def next_line(self) -> str:
        return self.read().unwrap()

    def next_integer(self) -> int:
        return self.scan(parse_integer).unwrap()

    def next_float(self) -> float:
        return self.scan(parse_float).unwrap()

    def fetch_command(self) -> CommandInput:
        return self.scan(create_command_input).unwrap()

    def fetch_unit(self) -> UnitInput:
        return self.scan(create_unit_input).unwrap()

    # --- Retrying collectors -----------------------------------------------
    def _collect(self, parser: Callable[[str], Any], accept: Callable[[Any], bool] = lambda value: True,
                 rejected: str = ""):
        while True:
            result = self.scan(parser)
            if result.status is ScanStatus.OK:
                if accept(result.value):
                    return result.value
                self.output.print_input_prompt(rejected)
            elif result.status is ScanStatus.INVALID:
                self.output.print_input_prompt(str(result.error))
            else:
                return result.unwrap()

    def collect_valid_string(self) -> str:
        return self._collect(lambda line: line)

    def collect_valid_float(self) -> float:
        return self._collect(parse_float, lambda number: number >= 0, "Value cannot be negative.")

    def collect_valid_integer(self) -> int:
        return self._collect(parse_integer, lambda number: number >= 0, "Value cannot be negative.")

    def collect_valid_unit_input(self) -> UnitInput:
        return self._collect(create_unit_input, lambda unit_input: unit_input.amount >= 0,
                             "Amount cannot be negative, accepted format is: {float} {unit}")
