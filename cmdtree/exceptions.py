# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Cmdtree CLI framework.

Declaration errors are raised while the command tree is being built. Parse
errors are raised while a token list is consumed against the tree and abort
the whole parse run. Every error keeps the values it reports as attributes so
callers can inspect them without parsing the message.

All exceptions inherit from `CmdtreeError`, the base exception for the framework.

Exception Hierarchy:
- CmdtreeError
    ├── CommandDeclarationError
    │   └── DuplicateDeclarationError
    ├── MissingRequiredValueError
    └── CommandParseError
        ├── UnknownOptionError
        ├── MissingOptionValueError
        ├── InvalidOptionValueError
        ├── MissingRequiredOptionError
        └── ArityError

These are raised internally and surface unchanged to whoever called
`Command.parse()`; the `cmdtree` entry point reports them and exits with
status 1.
"""


class CmdtreeError(Exception):
    """Base exception for the Cmdtree framework."""


class CommandDeclarationError(CmdtreeError):
    """Exception raised when a command, option or argument is declared incorrectly."""


class DuplicateDeclarationError(CommandDeclarationError):
    """Exception raised when two options or two subcommands share a name on one command."""

    def __init__(self, name: str, kind: str = "option"):
        self.name = name
        self.kind = kind
        super().__init__(f"Duplicate {kind} name: '{name}'")


class MissingRequiredValueError(CmdtreeError):
    """Exception raised when reading an option that has neither a bound nor a default value."""

    def __init__(self, option_name: str):
        self.option_name = option_name
        super().__init__(f"Missing given and default value for option: {option_name}")


class CommandParseError(CmdtreeError):
    """Base exception for errors raised while parsing command line tokens."""


class UnknownOptionError(CommandParseError):
    """Exception raised when a `-x` or `--name` token matches no option on the command."""

    def __init__(self, token: str):
        self.token = token
        self.option_name = token.lstrip("-")
        kind = "long" if token.startswith("--") else "short"
        super().__init__(f"Unknown {kind} option: {self.option_name}")


class MissingOptionValueError(CommandParseError):
    """Exception raised when a value-taking option is the last token."""

    def __init__(self, option_name: str):
        self.option_name = option_name
        super().__init__(f"Missing value for option: {option_name}")


class InvalidOptionValueError(CommandParseError):
    """Exception raised when an option's converter rejects the given token."""

    def __init__(self, option_name: str, token: str, reason: str = ""):
        self.option_name = option_name
        self.token = token
        self.reason = reason
        message = f"Wrong value for option: {option_name}: {token}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingRequiredOptionError(CommandParseError):
    """Exception raised when an option without a default was not given."""

    def __init__(self, option_name: str):
        self.option_name = option_name
        super().__init__(f"Missing option: {option_name}")


class ArityError(CommandParseError):
    """Exception raised when the number of positional values is out of range."""

    def __init__(self, argument_name: str, got: int, minimum: int, maximum: int):
        self.argument_name = argument_name
        self.got = got
        self.minimum = minimum
        self.maximum = maximum
        if got < minimum:
            message = (
                f"Missing argument: {argument_name} "
                f"(expected at least {minimum}, got {got})"
            )
        else:
            message = (
                f"Too many arguments: {argument_name} "
                f"(expected at most {maximum}, got {got})"
            )
        super().__init__(message)
