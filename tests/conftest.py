import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cropstage.domain.models import CropDescriptor, Rect, Size, Vector  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Create a headless QApplication for tests that touch Qt objects."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def square_image() -> Size:
    return Size(100, 100)


@pytest.fixture
def landscape_image() -> Size:
    return Size(200, 100)


@pytest.fixture
def centered_crop() -> CropDescriptor:
    return CropDescriptor(center=Vector(0.5, 0.5), zoom=1.0, rotation=0.0)


@pytest.fixture
def square_stage() -> Rect:
    return Rect(0, 0, 100, 100)
