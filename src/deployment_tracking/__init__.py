"""
deployment-tracking: Python library for tracking local smart contract deployments
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    CompilerError,
    DatabaseIOError,
    DatabaseNotFoundError,
    DeploymentTrackingError,
    FormatError,
    InsertionError,
    SerializationError,
    UnsupportedStrategyError,
)
from .hashing import derive_chain_key, derive_contract_key
from .reporting import CliError, CompilationError, ConfigurationSetError, format_error
from .tracker import DeploymentTracker
from .types import DeploymentRecord, ProjectConfig

try:
    __version__ = version("deployment-tracking")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentTracker",
    "DeploymentRecord",
    "ProjectConfig",
    "derive_chain_key",
    "derive_contract_key",
    "DeploymentTrackingError",
    "DatabaseNotFoundError",
    "DatabaseIOError",
    "FormatError",
    "SerializationError",
    "InsertionError",
    "CompilerError",
    "UnsupportedStrategyError",
    "CliError",
    "CompilationError",
    "ConfigurationSetError",
    "format_error",
]
