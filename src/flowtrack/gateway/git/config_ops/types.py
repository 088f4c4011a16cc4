"""Discriminated union types for Git configuration writes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigWritten:
    """Success result from writing a config value."""

    key: str
    value: str


@dataclass(frozen=True)
class ConfigWriteError:
    """Error: the repository config could not be written. Implements NonIdealState."""

    key: str
    message: str

    @property
    def error_type(self) -> str:
        return "config-write-failed"
