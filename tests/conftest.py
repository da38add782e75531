import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from captain import Module  # noqa: E402


@pytest.fixture
def greeter() -> Module:
    return Module(greet=lambda: "hi", count=5)
