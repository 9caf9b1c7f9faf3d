"""Reads one or more properties files into a destination key of a config store."""

import logging
import sys
from pathlib import Path
from typing import Any, Callable

from pydantic import dataclasses

from properties_reader.config import ReaderConfig
from properties_reader.errors import ConfigConflictError, PropertiesReaderError, RequiredFileMissingError
from properties_reader.listing import to_list
from properties_reader.merger import Merger
from properties_reader.parser import Document, PropertiesParser
from properties_reader.store import ConfigStore

logger = logging.getLogger(__name__)

FileReader = Callable[[str, str], str | None]

BYTE_ORDER_MARK = "\ufeff"


@dataclasses.dataclass(frozen=True)
class ReadResult:
    target: str
    document: dict[str, Any]
    files_read: list[str]
    files_skipped: list[str]


def read_file(filename: str | Path, encoding: str = "utf-8") -> str | None:
    """Read a properties file, None if it does not exist or cannot be read.

    A leading byte order mark is dropped.
    """
    path = Path(filename)
    if not path.is_file():
        return None

    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s: %s", filename, e)
        return None

    return text.removeprefix(BYTE_ORDER_MARK)


class PropertiesTask:
    """Parses property files in order and stores the merged document under a target key"""

    def __init__(self, store: ConfigStore, reader: FileReader = read_file, encoding: str = "utf-8"):
        self.store = store
        self.reader = reader
        self.encoding = encoding

    def run(self, target: str, files) -> ReadResult:
        """
        Read, parse and merge the given files into store[target].

        The first file is required, later files are optional and skipped
        with a warning when unreadable. Later files override top-level keys
        of earlier ones.

        Raises:
            ConfigConflictError: target already holds a value, nothing is read
            RequiredFileMissingError: the first file cannot be read, store untouched
        """
        if self.store.has(target):
            logger.error("Conflict - property %s already exists in config store", target)
            raise ConfigConflictError(target)

        filenames = to_list(files)

        parsed: Document = {}
        files_read = []
        files_skipped = []
        for i, filename in enumerate(filenames):
            name = str(filename)
            text = self.reader(filename, self.encoding)

            # Only the first file is required
            if text is None and i == 0:
                logger.error("Could not read required properties file: %s", name)
                raise RequiredFileMissingError(name)
            elif text is None:
                logger.warning("Could not read optional properties file: %s", name)
                files_skipped.append(name)
                continue

            logger.debug("Read properties file %s for %s", name, target)
            files_read.append(name)
            parsed = Merger.merge(parsed, PropertiesParser.parse(text))

        result = ReadResult(
            target=target,
            document=parsed,
            files_read=files_read,
            files_skipped=files_skipped,
        )
        self.store.set(target, parsed)
        return result


def run_targets(
    config: ReaderConfig,
    store: ConfigStore,
    targets: list[str] | None = None,
    reader: FileReader = read_file,
) -> int:
    """Run the selected targets (default: all, in declaration order).

    Returns:
        0 on success, 1 on the first failing target
    """
    task = PropertiesTask(store, reader=reader, encoding=config.encoding)

    for target in targets or list(config.targets):
        try:
            result = task.run(target, config.files_for(target))
        except (PropertiesReaderError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        # stdout may carry the resulting document
        print(f"Read {len(result.files_read)} file(s) into '{target}'", file=sys.stderr)
        for skipped in result.files_skipped:
            print(f"  skipped: {skipped}", file=sys.stderr)

    return 0
