import logging
import sys
from pathlib import Path

import yaml
from jinja2 import TemplateError
from pydantic import ValidationError

from properties_reader.cli import CLI
from properties_reader.config import CONFIG_FILE, ConfigLoader, find_config
from properties_reader.errors import PropertiesReaderError
from properties_reader.logging_utils import configure_logging
from properties_reader.rendering import render_file
from properties_reader.store import MemoryConfigStore, YamlConfigStore
from properties_reader.task import PropertiesTask, run_targets


def _dump(values: dict) -> None:
    print(yaml.safe_dump(values, sort_keys=False), end="")


def cmd_run(args: list[str], opts: dict[str, str | bool]) -> int:
    """Run targets from the config file against the config store."""
    if "config" in opts:
        config_path = Path(opts["config"])
        if not config_path.is_file():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            return 1
    else:
        config_path = find_config()
        if config_path is None:
            print(f"Error: No {CONFIG_FILE} found in {Path.cwd()}", file=sys.stderr)
            return 1

    try:
        config = ConfigLoader.load(config_path)
    except ValidationError as e:
        print(f"Error: Invalid config {config_path}:\n{e}", file=sys.stderr)
        return 1

    store_path = opts.get("store") or config.store
    store = YamlConfigStore(Path(store_path)) if store_path else MemoryConfigStore()

    exit_code = run_targets(config, store, targets=args or None)

    if exit_code == 0 and not store_path:
        _dump(store.as_dict())
    return exit_code


def cmd_parse(args: list[str], opts: dict[str, str | bool]) -> int:
    """Parse and merge property files, printing the result as YAML."""
    if not args:
        print("Error: parse requires at least one file", file=sys.stderr)
        return 1

    task = PropertiesTask(MemoryConfigStore(), encoding=str(opts.get("encoding", "utf-8")))
    try:
        result = task.run("properties", args)
    except PropertiesReaderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _dump(result.document)
    return 0


def cmd_render(args: list[str], opts: dict[str, str | bool]) -> int:
    """Render a template with the values of a config store."""
    if len(args) != 1 or "store" not in opts:
        print("Error: render requires a template and --store", file=sys.stderr)
        return 1

    store = YamlConfigStore(Path(opts["store"]))
    try:
        print(render_file(Path(args[0]), store.as_dict()), end="")
    except (TemplateError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def build_cli() -> CLI:
    return (
        CLI(
            name="properties-reader",
            description="Read Java style properties files into a nested configuration store.",
        )
        .add_command("run", "Run targets from the config file", cmd_run, usage="[target ...]")
        .add_command("parse", "Parse files and print the merged document", cmd_parse, usage="<file ...>")
        .add_command("render", "Render a template with stored values", cmd_render, usage="<template>")
        .add_option("config", f"Config file (default: ./{CONFIG_FILE})")
        .add_option("store", "YAML config store to write to or render from")
        .add_option("encoding", "Encoding of property files for parse (default: utf-8)")
        .add_option("verbose", "Log every file read", takes_value=False)
        .add_example("run")
        .add_example("run app env --store build/config.yml")
        .add_example("parse defaults.properties local.properties")
        .add_example("render settings.j2 --store build/config.yml")
    )


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging(logging.DEBUG if "--verbose" in argv else logging.WARNING)
    return build_cli().run(argv)


if __name__ == "__main__":
    sys.exit(main())
