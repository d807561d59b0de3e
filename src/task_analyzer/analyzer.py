"""
Task text analysis.

This module runs the independent extraction passes over a piece of free-text
task input and assembles their outputs into one immutable ``AnalysisResult``.
"""

import logging
from datetime import datetime
from typing import Optional

from .config.settings import AnalyzerConfig
from .extractors import (
    CategoryClassifier,
    DueDateExtractor,
    DurationEstimator,
    KeywordExtractor,
    PriorityClassifier,
    SentimentAnalyzer,
)
from .models import AnalysisResult


class TaskTextAnalyzer:
    """
    Rule-based interpreter for task descriptions.

    ``analyze`` keeps no state between calls: given the same text and reference
    time it returns an identical result. Extractor instances only hold read-only
    lookup tables and lazily loaded NLTK models, so one analyzer can be shared
    across threads.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        keyword_extractor: Optional[KeywordExtractor] = None,
        sentiment_analyzer: Optional[SentimentAnalyzer] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            config: Analyzer configuration, defaults when omitted
            keyword_extractor: Replacement keyword pass
            sentiment_analyzer: Replacement sentiment pass
        """
        self.config = config or AnalyzerConfig()
        self.logger = logging.getLogger(__name__)

        self.due_date_extractor = DueDateExtractor()
        self.priority_classifier = PriorityClassifier()
        self.category_classifier = CategoryClassifier()
        self.duration_estimator = DurationEstimator(self.config.default_duration_minutes * 60)
        self.keyword_extractor = keyword_extractor or KeywordExtractor(
            max_keywords=self.config.max_keywords,
            min_length=self.config.min_keyword_length,
            download_data=self.config.download_nltk_data,
        )
        self.sentiment_analyzer = sentiment_analyzer or SentimentAnalyzer(
            backend=self.config.sentiment_backend,
            transformer_model=self.config.transformer_model,
            download_data=self.config.download_nltk_data,
        )

    def analyze(self, text: Optional[str], now: Optional[datetime] = None) -> AnalysisResult:
        """
        Interpret free-text task input.

        Args:
            text: Raw task text, typically title and description joined by a space
            now: Reference time for relative date phrases; the current local time
                when omitted

        Returns:
            The structured interpretation
        """
        if now is None:
            now = datetime.now()

        clean_text = (text or '').strip()
        if not clean_text:
            return AnalysisResult(estimated_duration=self.duration_estimator.default)

        result = AnalysisResult(
            due_date=self.due_date_extractor.extract(clean_text, now),
            priority=self.priority_classifier.classify(clean_text),
            category=self.category_classifier.classify(clean_text),
            estimated_duration=self.duration_estimator.classify(clean_text),
            keywords=self.keyword_extractor.extract(clean_text),
            sentiment_score=self.sentiment_analyzer.score(clean_text),
        )

        self.logger.debug(
            f"Analyzed {len(clean_text)} chars: priority={result.priority.value} "
            f"category={result.category.value} duration={result.estimated_duration}s "
            f"due={result.due_date.isoformat() if result.due_date else None}"
        )
        return result


_default_analyzer: Optional[TaskTextAnalyzer] = None


def analyze(text: Optional[str], now: Optional[datetime] = None) -> AnalysisResult:
    """Analyze text with a shared default-configured analyzer."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = TaskTextAnalyzer()
    return _default_analyzer.analyze(text, now)
