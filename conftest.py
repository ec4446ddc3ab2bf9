import sys
from pathlib import Path

import pytest

# Allow running the suite from a plain checkout without `pip install -e .`
_SRC = Path(__file__).parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


@pytest.fixture
def hawaii():
    """Baseline used throughout the resolver scenarios."""
    return (19.5, -155.5)
