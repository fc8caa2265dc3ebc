"""Discovery and parsing of path-alias configuration (tsconfig.json).

The nearest configuration file is found by walking up from a starting
directory. A file that is missing, unreadable or malformed never aborts
resolution; the walk simply continues with the parent directory.
"""

import json
import logging
import re
from dataclasses import dataclass

from pydantic import ValidationError

from ..models.analysis_models import AliasConfig
from ..models.tsconfig_models import TsConfigFile
from .filesystem import FileSystem, join_path, parent_directory
from .tracer import NULL_TRACER, Tracer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE_NAME = "tsconfig.json"


@dataclass(frozen=True)
class AliasMatcher:
    """Compiled form of one alias pattern and its first replacement."""

    pattern: str
    replacement: str
    regex: re.Pattern

    def rewrite(self, specifier: str) -> str | None:
        """Substitute the captured wildcard into the replacement, or None on no match."""
        match = self.regex.match(specifier)
        if match is None:
            return None
        captured = match.group(1) if self.regex.groups else ""
        return self.replacement.replace("*", captured, 1)


def compile_alias_pattern(pattern: str) -> re.Pattern:
    """Build an anchored regex where the first ``*`` captures any text."""
    if "*" not in pattern:
        return re.compile("^" + re.escape(pattern) + "$")
    prefix, suffix = pattern.split("*", 1)
    return re.compile("^" + re.escape(prefix) + "(.*)" + re.escape(suffix) + "$")


def build_matchers(config: AliasConfig) -> list[AliasMatcher]:
    """Matchers in the configuration's declared order; empty replacement lists are skipped."""
    matchers = []
    for pattern, replacements in config.paths.items():
        if not replacements:
            continue
        matchers.append(AliasMatcher(pattern=pattern, replacement=replacements[0], regex=compile_alias_pattern(pattern)))
    return matchers


def parse_alias_config(raw_text: str, config_dir: str) -> AliasConfig:
    """Parse configuration text.

    Raises:
        ValueError: If the text is not JSON or does not fit the expected schema
    """
    data = json.loads(raw_text)
    if not isinstance(data, dict):
        raise ValueError("Configuration root must be an object")
    try:
        parsed = TsConfigFile.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    options = parsed.compiler_options
    if options is None:
        return AliasConfig(config_dir=config_dir)
    return AliasConfig(base_url=options.base_url, paths=dict(options.paths or {}), config_dir=config_dir)


class AliasConfigLoader:
    """Finds the nearest alias configuration for a directory.

    Results are cached per starting directory for the lifetime of the loader,
    so a loader should live no longer than one analysis run.
    """

    def __init__(
        self,
        fs: FileSystem,
        config_file_name: str = DEFAULT_CONFIG_FILE_NAME,
        tracer: Tracer = NULL_TRACER,
    ):
        self.fs = fs
        self.config_file_name = config_file_name
        self.tracer = tracer
        self._cache: dict[str, AliasConfig] = {}
        self._matchers: dict[str | None, list[AliasMatcher]] = {}

    async def load(self, start_dir: str) -> AliasConfig:
        if start_dir in self._cache:
            return self._cache[start_dir]
        config = await self._search(start_dir)
        self._cache[start_dir] = config
        return config

    def matchers(self, config: AliasConfig) -> list[AliasMatcher]:
        key = config.config_dir
        if key not in self._matchers:
            self._matchers[key] = build_matchers(config)
        return self._matchers[key]

    async def _search(self, start_dir: str) -> AliasConfig:
        current_dir = start_dir
        while True:
            config_path = join_path(current_dir, self.config_file_name)
            config = await self._try_load(config_path, current_dir)
            if config is not None:
                self.tracer.emit("config_found", path=config_path, paths=config.paths, base_url=config.base_url)
                return config

            parent = parent_directory(current_dir)
            if parent == current_dir:
                break
            current_dir = parent

        self.tracer.emit("config_not_found", start_dir=start_dir)
        return AliasConfig()

    async def _try_load(self, config_path: str, config_dir: str) -> AliasConfig | None:
        if not await self.fs.exists(config_path):
            return None
        try:
            raw_text = await self.fs.read_text(config_path)
            return parse_alias_config(raw_text, config_dir)
        except (OSError, ValueError) as e:
            logger.debug("Ignoring unusable config %s: %s", config_path, e)
            self.tracer.emit("config_invalid", path=config_path, error=str(e))
            return None
