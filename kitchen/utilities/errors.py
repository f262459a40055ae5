"""Error types raised by the scanner, the unit algebra, storages and the dispatcher."""


class KitchenError(Exception):
    """Base class for every error the interpreter reports and survives."""


class EmptyInput(KitchenError, ValueError):
    def __init__(self, message: str = "Input cannot be empty."):
        super().__init__(message)


class InputExhausted(EmptyInput):
    """The input stream has no more lines."""

    def __init__(self):
        super().__init__("There are no lines to scan.")


class NotANumber(KitchenError, ValueError):
    def __init__(self, text: str, expected: str = "number"):
        self.text = text
        self.expected = expected
        super().__init__(f"'{text}' is not a valid {expected}.")


class MissingUnitTokens(KitchenError, ValueError):
    def __init__(self):
        super().__init__("Missing unit inputs, accepted format is: {float} {unit}")


class UnknownUnit(KitchenError, ValueError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown unit '{token}', accepted units are: kg, g, l, dl, ml")


class IncompatibleUnits(KitchenError, ValueError):
    def __init__(self, source, target):
        self.source = source
        self.target = target
        super().__init__(f"Illegal operation: cannot convert from {source} to {target}")


class NullIngredient(KitchenError, ValueError):
    def __init__(self):
        super().__init__("Ingredient cannot be None")


class IllegalCommandCombination(KitchenError):
    """Raised when a subcommand is not declared by the command it follows."""

    def __init__(self, command, subcommand: str):
        self.command = command
        self.subcommand = subcommand
        word = getattr(command, "value", str(command))
        super().__init__(f"Invalid command combination: '{word}' + '{subcommand}'")


class Aborted(KitchenError):
    """The user typed the abort sentinel while input was being collected."""

    def __init__(self):
        super().__init__("Operation aborted.")


__all__ = [
    "KitchenError", "EmptyInput", "InputExhausted", "NotANumber", "MissingUnitTokens",
    "UnknownUnit", "IncompatibleUnits", "NullIngredient", "IllegalCommandCombination", "Aborted",
]
