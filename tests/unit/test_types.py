"""Unit tests for deployment-tracking data types."""

from pathlib import Path

import pytest

from deployment_tracking.exceptions import SerializationError
from deployment_tracking.types import DeploymentRecord, ProjectConfig

ADDRESS = "0x" + "11" * 20


class TestDeploymentRecord:
    """Test DeploymentRecord conversion to and from stored values."""

    def test_to_dict(self):
        """Test that records serialize to name/address mappings."""
        record = DeploymentRecord(name="Token", address=ADDRESS)
        assert record.to_dict() == {"name": "Token", "address": ADDRESS}

    def test_from_dict(self):
        """Test that stored mappings load as records."""
        record = DeploymentRecord.from_dict({"name": "Token", "address": ADDRESS})
        assert record == DeploymentRecord(name="Token", address=ADDRESS)

    def test_from_dict_ignores_extra_fields(self):
        """Test that unknown fields in a stored record are ignored."""
        record = DeploymentRecord.from_dict(
            {"name": "Token", "address": ADDRESS, "note": "manual"}
        )
        assert record.name == "Token"

    def test_from_dict_rejects_non_mapping(self):
        """Test that scalars are not records."""
        with pytest.raises(SerializationError):
            DeploymentRecord.from_dict("0x1234")

    def test_from_dict_rejects_missing_fields(self):
        """Test that both name and address are required."""
        with pytest.raises(SerializationError, match="address"):
            DeploymentRecord.from_dict({"name": "Token"})

        with pytest.raises(SerializationError, match="name"):
            DeploymentRecord.from_dict({"address": ADDRESS})

    def test_from_dict_rejects_non_string_fields(self):
        """Test that field values must be strings."""
        with pytest.raises(SerializationError):
            DeploymentRecord.from_dict({"name": "Token", "address": 17})

    @pytest.mark.parametrize(
        "address",
        [
            "not-an-address",
            "0x1234",  # Too short
            "0x" + "11" * 21,  # Too long
            "0x" + "zz" * 20,  # Not hex
        ],
    )
    def test_from_dict_rejects_invalid_address(self, address):
        """Test that stored addresses must be 20-byte hex values."""
        with pytest.raises(SerializationError, match="address"):
            DeploymentRecord.from_dict({"name": "Token", "address": address})


class TestProjectConfig:
    """Test ProjectConfig construction from the environment."""

    def test_from_env_uses_variable(self, tmp_path: Path, monkeypatch):
        """Test that $DEPLOYMENT_TRACKING_PROJECT sets the project root."""
        monkeypatch.setenv("DEPLOYMENT_TRACKING_PROJECT", str(tmp_path))
        assert ProjectConfig.from_env().project_path == tmp_path

    def test_from_env_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        """Test that the current directory is used when the variable is unset."""
        monkeypatch.delenv("DEPLOYMENT_TRACKING_PROJECT", raising=False)
        monkeypatch.chdir(tmp_path)
        assert ProjectConfig.from_env().project_path == Path.cwd()
