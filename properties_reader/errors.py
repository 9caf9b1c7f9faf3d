class PropertiesReaderError(Exception):
    """Base class for failures that abort a properties task."""


class ConfigConflictError(PropertiesReaderError):
    """Raised when the destination key is already present in the config store."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Conflict - property '{target}' already exists in config store")


class RequiredFileMissingError(PropertiesReaderError):
    """Raised when the first (required) properties file cannot be read."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Could not read required properties file: {filename}")
