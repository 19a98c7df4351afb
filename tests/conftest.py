import logging
from pathlib import Path
import sys

import pytest

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SAMPLE_INPUT = """5 3
1 1 E
RFRFRFRF

3 2 N
FRRFLLFFRRFLL

0 3 W
LLFFFLFLFL
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_INPUT


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_INPUT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def restore_root_logging():
    # main() reconfigures the root logger; undo it so handlers bound to a
    # finished test's capture streams do not leak into the next test.
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
