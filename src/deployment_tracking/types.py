"""Data types and dataclasses for deployment-tracking library."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from eth_utils import is_hex_address

from .constants import PROJECT_ENV
from .exceptions import SerializationError


@dataclass
class DeploymentRecord:
    """A tracked deployment of one contract instance."""

    name: str  # Contract name, e.g., "Token"
    address: str  # Lowercase 0x-prefixed address

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "address": self.address}

    @classmethod
    def from_dict(cls, data: Any) -> "DeploymentRecord":
        """
        Build a record from a stored value.

        Args:
            data: Value read from the tracking database

        Returns:
            DeploymentRecord

        Raises:
            SerializationError: If the value is not a {name, address} mapping of
                strings, or the address is not a hex address
        """
        if not isinstance(data, dict):
            raise SerializationError(
                f"Expected a deployment record mapping, got {type(data).__name__}"
            )

        missing = [field for field in ("name", "address") if field not in data]
        if missing:
            raise SerializationError(
                f"Deployment record is missing field(s): {', '.join(missing)}"
            )

        name = data["name"]
        address = data["address"]
        if not isinstance(name, str) or not isinstance(address, str):
            raise SerializationError("Deployment record fields must be strings")

        if not is_hex_address(address):
            raise SerializationError(
                f"Deployment record address is not a 20-byte hex address: {address!r}"
            )

        return cls(name=name, address=address)


@dataclass
class ProjectConfig:
    """Project configuration consumed by the tracker."""

    project_path: Path

    @classmethod
    def from_env(cls) -> "ProjectConfig":
        """Use $DEPLOYMENT_TRACKING_PROJECT, or the current directory if unset."""
        project_path = os.environ.get(PROJECT_ENV)
        if project_path is None:
            return cls(project_path=Path.cwd())
        return cls(project_path=Path(project_path))
