"""Path management utilities for deployment-tracking library."""

from pathlib import Path
from typing import Union

from .constants import PROJECT_DIRECTORY, TRACKING_FILE


def get_project_dir(project_path: Union[Path, str]) -> Path:
    """
    Get the tool's state directory for a project.

    Args:
        project_path: Project root directory

    Returns:
        Absolute path to <project_path>/.deployment-tracking
    """
    return Path(project_path).absolute() / PROJECT_DIRECTORY


def get_tracking_file(project_path: Union[Path, str]) -> Path:
    """
    Get the tracking database path for a project.

    Args:
        project_path: Project root directory

    Returns:
        Absolute path to <project_path>/.deployment-tracking/tracking.json
    """
    return get_project_dir(project_path) / TRACKING_FILE
