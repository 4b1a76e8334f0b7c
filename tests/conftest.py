import os
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module imports (diorama, app)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless: no window, no pygame banner
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


class ScriptedRandom:
    """RandomSource replaying a fixed list of values, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture(autouse=True)
def _reset_settings():
    from diorama.settings import settings

    strict = settings.strict
    ceiling = settings.default_max_particles
    settings.strict = False
    settings.default_max_particles = None
    yield
    settings.strict = strict
    settings.default_max_particles = ceiling
