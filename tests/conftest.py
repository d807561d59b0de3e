"""Shared fixtures for analyzer tests."""

from datetime import datetime

import pytest

from task_analyzer.analyzer import TaskTextAnalyzer
from task_analyzer.extractors import KeywordExtractor, SentimentAnalyzer
from task_analyzer.extractors.nltk_resources import (
    POS_TAGGER_RESOURCES,
    VADER_RESOURCES,
    ensure_resource,
)


# Tags for words the tests use; everything else is tagged as a noun
STUB_TAGS = {
    'the': 'DT', 'a': 'DT', 'an': 'DT', 'to': 'TO', 'by': 'IN', 'with': 'IN',
    'for': 'IN', 'in': 'IN', 'and': 'CC', 'or': 'CC',
    'call': 'VB', 'finish': 'VB', 'submit': 'VBP', 'buy': 'VB', 'meet': 'VB',
    'schedule': 'VB', 'urgent': 'JJ', 'quick': 'JJ', 'short': 'JJ',
    'tomorrow': 'NN', 'morning': 'NN', 'friday': 'NNP', 'monday': 'NNP',
    'let': 'VB', "let's": 'VB', 'next': 'JJ', 'week': 'NN',
}


def stub_tagger(tokens):
    return [(token, STUB_TAGS.get(token.lower(), 'NN')) for token in tokens]


@pytest.fixture
def now():
    """Wednesday morning reference time."""
    return datetime(2025, 1, 15, 10, 30, 0)


@pytest.fixture
def monday_now():
    return datetime(2025, 1, 13, 8, 0, 0)


@pytest.fixture
def analyzer():
    """Analyzer with deterministic keyword tagging and neutral sentiment."""
    return TaskTextAnalyzer(
        keyword_extractor=KeywordExtractor(tagger=stub_tagger),
        sentiment_analyzer=SentimentAnalyzer(scorer=lambda paragraph: 0.0),
    )


@pytest.fixture(scope="session")
def nltk_tagger_data():
    if not ensure_resource(POS_TAGGER_RESOURCES):
        pytest.skip("NLTK POS tagger data unavailable")


@pytest.fixture(scope="session")
def nltk_vader_data():
    if not ensure_resource(VADER_RESOURCES):
        pytest.skip("NLTK VADER lexicon unavailable")
