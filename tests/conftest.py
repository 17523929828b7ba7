# Ensure the repository root is on sys.path so `escposkit` imports without installing.

import sys
from pathlib import Path

import pytest
from PIL import Image

repo_root = str(Path(__file__).resolve().parent.parent)
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from escposkit.transport import MemorySink  # noqa: E402


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def black_square() -> Image.Image:
    return Image.new("RGB", (8, 8), (0, 0, 0))


@pytest.fixture
def white_image() -> Image.Image:
    return Image.new("RGB", (40, 20), (255, 255, 255))
