import logging
import tomllib
from enum import IntEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

DEFAULT_CONFIG_FILE = Path(".grammar-lint.toml")

logger = logging.getLogger(__name__)


class Verbosity(IntEnum):
    NORMAL = 0
    QUIET = 1
    SILENT = 2


class RunConfig(BaseModel):
    """Per-run options, built once from the command line"""

    model_config = ConfigDict(frozen=True)

    fix_requested: bool = False
    number_lines: bool = False
    verbosity: Verbosity = Verbosity.NORMAL
    comment_prefixes: str = ""
    delimiter: str = ""
    input_path: str = "-"
    output_path: str = "-"
    suggestion_path: str = "-"

    @property
    def echoes_document(self) -> bool:
        return self.verbosity <= Verbosity.QUIET

    @property
    def prints_suggestions(self) -> bool:
        return self.verbosity == Verbosity.NORMAL


class LintSettings:
    """Handles loading of .grammar-lint.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.select: list[str] = []
        self.ignore: list[str] = []
        self.log_level: str = "WARNING"

        if config_path and config_path.is_file():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            # Fall back to defaults; a broken settings file must not stop the filter
            logger.warning("Ignoring settings file %s: %s", path, exc)
            return

        lint_data = data.get("tool", {}).get("grammar-lint", {})
        self.select = _string_list(lint_data, "select", self.select, path)
        self.ignore = _string_list(lint_data, "ignore", self.ignore, path)
        self.log_level = str(lint_data.get("log-level", self.log_level)).upper()

    def apply_to_registry(self, registry: Any) -> list[Any]:
        """Return list of enabled rules based on this config"""
        return registry.get_enabled_rules(select=self.select, ignore=self.ignore)


def _string_list(data: dict, key: str, default: list[str], path: Path) -> list[str]:
    value = data.get(key, default)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    logger.warning("Ignoring '%s' in %s: expected a list of strings, got %r", key, path, value)
    return default
