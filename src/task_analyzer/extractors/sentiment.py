"""
Sentiment scoring of task text.

The default backend is NLTK's VADER compound score. A transformers
text-classification model can be configured instead; if it fails to load the
analyzer logs a warning and continues with VADER.
"""

import logging
import re
from typing import Callable, List, Optional

from nltk.sentiment import SentimentIntensityAnalyzer

from .nltk_resources import VADER_RESOURCES, ensure_resource


# Maps one paragraph of text to a polarity in [-1.0, 1.0]
Scorer = Callable[[str], float]

PARAGRAPH_SPLIT = re.compile(r'\n\s*\n')


def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


class SentimentAnalyzer:
    """Paragraph-level polarity averaged into one score."""

    def __init__(
        self,
        backend: str = 'vader',
        transformer_model: str = 'distilbert-base-uncased-finetuned-sst-2-english',
        scorer: Optional[Scorer] = None,
        download_data: bool = True,
    ):
        self.backend = backend
        self.transformer_model = transformer_model
        self.download_data = download_data
        self.logger = logging.getLogger(__name__)

        self._scorer = scorer
        self._scorer_checked = scorer is not None

    def score(self, text: str) -> float:
        """
        Score the polarity of text.

        Args:
            text: Task text

        Returns:
            Mean paragraph polarity in [-1.0, 1.0]; 0.0 for empty text or when no
            backend is available
        """
        paragraphs = self._split_paragraphs(text)
        if not paragraphs:
            return 0.0

        scorer = self._get_scorer()
        if scorer is None:
            return 0.0

        scores = [clamp(scorer(paragraph)) for paragraph in paragraphs]
        return round(clamp(sum(scores) / len(scores)), 4)

    @staticmethod
    def _split_paragraphs(text: str) -> List[str]:
        return [p.strip() for p in PARAGRAPH_SPLIT.split(text) if p.strip()]

    def _get_scorer(self) -> Optional[Scorer]:
        if not self._scorer_checked:
            self._scorer_checked = True
            if self.backend == 'transformer':
                self._scorer = self._initialize_transformer()
            if self._scorer is None:
                self._scorer = self._initialize_vader()
        return self._scorer

    def _initialize_vader(self) -> Optional[Scorer]:
        if not ensure_resource(VADER_RESOURCES, download=self.download_data):
            self.logger.warning("VADER lexicon not found, sentiment will be neutral")
            return None

        analyzer = SentimentIntensityAnalyzer()
        self.logger.info("VADER sentiment analyzer initialized")
        return lambda paragraph: analyzer.polarity_scores(paragraph)['compound']

    def _initialize_transformer(self) -> Optional[Scorer]:
        # Wrap in try-except to gracefully handle initialization failures
        try:
            from transformers import pipeline

            classifier = pipeline(
                "text-classification",
                model=self.transformer_model,
                top_k=None,
                device=-1  # Force CPU
            )
            self.logger.info("Transformer sentiment classifier initialized successfully")
        except Exception as classifier_error:
            self.logger.warning(
                f"Failed to initialize transformer classifier: {classifier_error}. Falling back to VADER."
            )
            return None

        def score(paragraph: str) -> float:
            # top_k=None returns every label with its probability
            outputs = classifier(paragraph, truncation=True)
            if outputs and isinstance(outputs[0], list):
                outputs = outputs[0]
            probabilities = {item['label'].upper(): item['score'] for item in outputs}
            return probabilities.get('POSITIVE', 0.0) - probabilities.get('NEGATIVE', 0.0)

        return score
