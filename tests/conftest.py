"""Shared pytest fixtures for deployment-tracking tests."""

from pathlib import Path

import pytest

from deployment_tracking import DeploymentTracker, ProjectConfig


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a temporary project root."""
    project = tmp_path / "project"
    project.mkdir(parents=True, exist_ok=True)
    return project


@pytest.fixture
def config(project_dir: Path) -> ProjectConfig:
    """Return a project configuration rooted at the temporary project."""
    return ProjectConfig(project_path=project_dir)


@pytest.fixture
def tracker(config: ProjectConfig) -> DeploymentTracker:
    """Return a tracker for a project without a database."""
    return DeploymentTracker(config)


@pytest.fixture
def tracker_with_db(tracker: DeploymentTracker) -> DeploymentTracker:
    """Return a tracker whose database has been created."""
    tracker.create_database()
    return tracker
