from __future__ import annotations

from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from guess_punctuation.config import make_config
from guess_punctuation.guesser import PunctuationGuesser


@pytest.fixture
def guesser_factory():
    def factory(**config_overrides):
        return PunctuationGuesser(make_config(**config_overrides))

    return factory
