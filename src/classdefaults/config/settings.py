"""Configuration settings using Pydantic Settings.

Provides typed configuration for the clone engine and the defaults composer,
with environment variable support.

Usage:
    from classdefaults.config import CloneSettings

    # Load from environment variables (CLASSDEFAULTS_*)
    settings = CloneSettings()

    # Or override with explicit values
    settings = CloneSettings(preserve_shared_references=False)
    copy = clone(value, settings=settings)
"""

from __future__ import annotations

from functools import cache

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install classdefaults"
    ) from e


class CloneSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for cloning and defaults composition.

    Attributes:
        preserve_shared_references: Keep registry entries until the top-level
            clone returns, so an object reachable through several references
            is copied once. When False, entries are released as soon as their
            subtree is done and only cycles resolve to a single copy.
        warn_on_locked_skip: Emit a UserWarning whenever a property is skipped
            because the target already holds it as non-writable or
            non-configurable.

    Environment Variables:
        CLASSDEFAULTS_PRESERVE_SHARED_REFERENCES
        CLASSDEFAULTS_WARN_ON_LOCKED_SKIP
    """

    model_config = SettingsConfigDict(
        env_prefix="CLASSDEFAULTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    preserve_shared_references: bool = True
    warn_on_locked_skip: bool = False


@cache
def get_settings() -> CloneSettings:
    """Return the process default settings, read from the environment once."""
    return CloneSettings()
