"""
Pytest configuration and fixtures for commander tests.
"""
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
PYTHON_SRC = REPO_ROOT / "python"
if str(PYTHON_SRC) not in sys.path:
    sys.path.append(str(PYTHON_SRC))

from commander.context import ConsoleContext
from commander.kinds import Vector3
from commander.targets import SceneObject, SceneObjectSpace


def make_scene() -> SceneObjectSpace:
    return SceneObjectSpace(
        [
            SceneObject("Cube", position=Vector3(1.0, 0.0, 0.0)),
            SceneObject("CubeSmall"),
            SceneObject("Player", kind="character"),
            SceneObject("Main Camera", kind="camera"),
            SceneObject("UICanvas"),
            SceneObject("Disabled", active=False),
        ]
    )


@pytest.fixture
def ctx(tmp_path):
    """Console context with a small scene and a throwaway history file."""
    context = ConsoleContext(history_path=tmp_path / "history.txt")
    context.objects = make_scene()
    return context
