"""Small CLI framework for the properties-reader commands."""

import sys
from dataclasses import dataclass, field
from typing import Callable

HELP_FLAGS = ("--help", "-h")


@dataclass
class Command:
    """A CLI subcommand."""
    name: str
    help: str
    handler: Callable[[list[str], dict[str, str | bool]], int]
    usage: str = ""


@dataclass
class Option:
    """A CLI option."""
    name: str
    help: str
    takes_value: bool = True


@dataclass
class ParsedArgs:
    command: Command | None
    args: list[str] = field(default_factory=list)
    opts: dict[str, str | bool] = field(default_factory=dict)
    show_help: bool = False


class UsageError(Exception):
    """Raised for invalid command lines."""


class CLI:
    """Simple CLI framework for consistent command structure."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.commands: list[Command] = []
        self.options: list[Option] = []
        self.examples: list[str] = []

    def add_command(self, name: str, help: str, handler: Callable, usage: str = "") -> "CLI":
        """Add a subcommand to the CLI."""
        self.commands.append(Command(name, help, handler, usage))
        return self

    def add_option(self, name: str, help: str, takes_value: bool = True) -> "CLI":
        """Add an option to the CLI."""
        self.options.append(Option(name, help, takes_value))
        return self

    def add_example(self, example: str) -> "CLI":
        """Add an example to the CLI."""
        self.examples.append(example)
        return self

    def print_usage(self, file=None) -> None:
        """Print usage information."""
        print(f"Usage: {self.name} <command> [args] [options]", file=file)
        print(file=file)
        print(self.description, file=file)
        print(file=file)
        print("Commands:", file=file)
        for cmd in self.commands:
            print(f"  {(cmd.name + ' ' + cmd.usage).strip():<28}{cmd.help}", file=file)
        print(file=file)
        if self.options:
            print("Options:", file=file)
            for opt in self.options:
                if opt.takes_value:
                    print(f"  --{opt.name} <value>  {opt.help}", file=file)
                else:
                    print(f"  --{opt.name}          {opt.help}", file=file)
            print(file=file)
        if self.examples:
            print("Examples:", file=file)
            for ex in self.examples:
                print(f"  {self.name} {ex}", file=file)

    def parse_args(self, argv: list[str]) -> ParsedArgs:
        """Parse command line arguments (without the program name).

        Raises:
            UsageError: for unknown commands or options and missing option values
        """
        if not argv:
            raise UsageError("No command given")

        if argv[0] in HELP_FLAGS:
            return ParsedArgs(None, show_help=True)

        command = next((c for c in self.commands if c.name == argv[0]), None)
        if command is None:
            raise UsageError(f"Unknown command: {argv[0]}")

        parsed = ParsedArgs(command)

        args = argv[1:]
        i = 0
        while i < len(args):
            arg = args[i]
            if arg in HELP_FLAGS:
                parsed.show_help = True
                i += 1
            elif arg.startswith("--"):
                opt_name = arg[2:]
                opt = next((o for o in self.options if o.name == opt_name), None)
                if opt is None:
                    raise UsageError(f"Unknown option: {arg}")
                if opt.takes_value:
                    if i + 1 >= len(args):
                        raise UsageError(f"Option --{opt_name} requires a value")
                    parsed.opts[opt_name] = args[i + 1]
                    i += 2
                else:
                    parsed.opts[opt_name] = True
                    i += 1
            else:
                parsed.args.append(arg)
                i += 1

        return parsed

    def run(self, argv: list[str]) -> int:
        """Parse argv and dispatch to the command handler, returning its exit code."""
        try:
            parsed = self.parse_args(argv)
        except UsageError as e:
            print(f"Error: {e}", file=sys.stderr)
            self.print_usage(file=sys.stderr)
            return 1

        if parsed.show_help:
            self.print_usage()
            return 0

        return parsed.command.handler(parsed.args, parsed.opts)
