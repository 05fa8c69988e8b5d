# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
# ==============================================

import pytest

from settings_guessr.config import AppConfig, reset_config
from settings_guessr.analysis import FieldAccumulator, FieldScorer, ClassifierRules, ScoringThresholds


# Long sentences made of long words: > 100 characters, > 80% letters
PROSE = [
    "Extraordinarily comprehensive documentation accompanies every installation "
    "package distributed throughout international marketplaces",
    "Sophisticated computational linguistics transforms unstructured conversational "
    "transcripts into searchable knowledge repositories",
    "Meticulously maintained botanical gardens showcase remarkable biodiversity "
    "alongside beautifully landscaped walking promenades",
]

UUID_V4 = "a1b2c3d4-e5f6-47a8-b9c0-d1e2f3a4b5c6"


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts without a cached configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config():
    """Default configuration, independent of the environment."""
    return AppConfig()


@pytest.fixture
def rules():
    return ClassifierRules.default()


@pytest.fixture
def scorer(rules):
    return FieldScorer(rules, ScoringThresholds())


@pytest.fixture
def accumulator(scorer):
    return FieldAccumulator(scorer)


@pytest.fixture
def prose():
    return list(PROSE)


@pytest.fixture
def sample_documents():
    """A small catalogue mixing every kind of field."""
    return [
        {
            "id": "1",
            "title": "hello",
            "price": 10,
            "in_stock": True,
            "session": UUID_V4,
            "image": "https://example.com/images/1.jpg",
            "tags": ["red", "blue"],
            "meta": {"rating": 4.5},
        },
        {
            "id": "2",
            "title": "world",
            "price": 20,
            "in_stock": False,
            "session": UUID_V4,
            "image": "https://example.com/images/2.jpg",
            "tags": ["green"],
            "meta": {"rating": 3.0},
        },
        {
            "id": "3",
            "title": "again",
            "price": 5,
            "in_stock": True,
            "session": UUID_V4,
            "image": "https://example.com/images/3.jpg",
            "tags": ["red"],
            "meta": {"rating": 4.5},
        },
    ]
