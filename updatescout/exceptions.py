"""Custom exceptions for updatescout."""


class UpdateScoutError(Exception):
    """Base exception for all updatescout errors."""


class ManifestNotFoundError(UpdateScoutError):
    """Raised when the package manifest does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"package.json file not found: {path}")


class ManifestParseError(UpdateScoutError):
    """Raised when the package manifest cannot be read or is not a JSON object."""


class LockfileParseError(UpdateScoutError):
    """Raised when lockfile text is structurally invalid."""

    def __init__(self, message: str, line_no: int):
        self.line_no = line_no
        super().__init__(f"line {line_no}: {message}")


class ConfigError(UpdateScoutError):
    """Raised when the priority-packages config is malformed."""


class RegistryError(UpdateScoutError):
    """Raised when a registry document lacks the fields we need."""
