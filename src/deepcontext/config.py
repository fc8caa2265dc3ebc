"""Configuration management for DeepContext."""

import os
from dataclasses import dataclass


@dataclass
class DeepContextConfig:
    """Configuration for the CLI and the context server."""

    # Analysis Configuration
    default_depth: int = 0
    max_depth_limit: int = 50
    max_alias_rewrites: int = 8
    config_file_name: str = "tsconfig.json"

    # Server Configuration
    project_root: str = "."

    # Runtime Configuration
    debug_mode: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "DeepContextConfig":
        """Create configuration from environment variables."""
        return cls(
            # Analysis Configuration
            default_depth=int(os.getenv("DEEPCONTEXT_DEFAULT_DEPTH", "0")),
            max_depth_limit=int(os.getenv("DEEPCONTEXT_MAX_DEPTH", "50")),
            max_alias_rewrites=int(os.getenv("DEEPCONTEXT_MAX_ALIAS_REWRITES", "8")),
            config_file_name=os.getenv("DEEPCONTEXT_CONFIG_FILE", "tsconfig.json"),

            # Server Configuration
            project_root=os.getenv("MCP_FILE_ROOT", "."),

            # Runtime Configuration
            debug_mode=os.getenv("DEEPCONTEXT_DEBUG", "false").lower() == "true",
            log_level=os.getenv("DEEPCONTEXT_LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """Validate configuration settings."""
        errors = []

        if self.default_depth < 0:
            errors.append("default_depth must be non-negative")

        if self.max_depth_limit < 0:
            errors.append("max_depth_limit must be non-negative")

        if self.default_depth > self.max_depth_limit:
            errors.append("default_depth cannot exceed max_depth_limit")

        if self.max_alias_rewrites <= 0:
            errors.append("max_alias_rewrites must be positive")

        if not self.config_file_name:
            errors.append("config_file_name cannot be empty")

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level not in valid_log_levels:
            errors.append(f"log_level must be one of {valid_log_levels}")

        return len(errors) == 0, errors

    def __post_init__(self):
        """Post-initialization validation."""
        is_valid, errors = self.validate()
        if not is_valid:
            raise ValueError(f"Invalid configuration: {', '.join(errors)}")


# Global configuration instance
_config: DeepContextConfig | None = None


def get_config() -> DeepContextConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = DeepContextConfig.from_environment()
    return _config


def set_config(config: DeepContextConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config
    _config = None
