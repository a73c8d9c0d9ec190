import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault('MPLBACKEND', 'Agg')

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config.koch_config import KochConfig  # noqa: E402


@pytest.fixture
def small_config():
    return KochConfig(width=800, height=600, padding=30, max_iterations=3, thread_sleep_time=0)
