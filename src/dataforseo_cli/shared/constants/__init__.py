"""
Constants for dataforseo-cli.

Re-exports the constant groups so callers can import from one place.
"""

from .api import APIConfig, APIStatus, Endpoints, ResponseDefaults
from .cache import Cache, Namespace
from .cli import CLICommands, CLIDefaults, CLIHelp, CLIOptions, OutputFormat

__all__ = [
    "APIConfig",
    "APIStatus",
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIOptions",
    "Cache",
    "Endpoints",
    "Namespace",
    "OutputFormat",
    "ResponseDefaults",
]
