"""Extraction passes run by the task text analyzer."""

from .classifiers import CategoryClassifier, DurationEstimator, PriorityClassifier, RuleTable
from .date_extractor import DueDateExtractor
from .keyword_extractor import KeywordExtractor
from .sentiment import SentimentAnalyzer

__all__ = [
    'CategoryClassifier',
    'DurationEstimator',
    'PriorityClassifier',
    'RuleTable',
    'DueDateExtractor',
    'KeywordExtractor',
    'SentimentAnalyzer',
]
