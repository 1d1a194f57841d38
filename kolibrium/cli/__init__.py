"""
Command-line interface module for kolibrium.

This package contains modules for parsing command-line arguments and
managing the project configuration.
"""

from .argument_parser import create_parser, parse_args
from .config import (ProjectConfiguration, load_config, load_project_configuration,
                     reset_project_configuration, save_config)

__all__ = [
    "create_parser",
    "parse_args",
    "ProjectConfiguration",
    "load_config",
    "load_project_configuration",
    "reset_project_configuration",
    "save_config",
]
