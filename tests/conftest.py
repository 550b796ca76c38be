import logging

import pytest

from src.mytrie.trie import Trie
from tests.trie_constants import GREETINGS


@pytest.fixture
def greetings_trie() -> Trie:
    """A trie holding a few greetings sharing the prefix 'Hall'."""
    return Trie(GREETINGS)


@pytest.fixture
def restore_root_logger():
    """Drop the file handlers a test installed and reset the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if isinstance(handler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
