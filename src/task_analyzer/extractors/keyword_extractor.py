"""
Keyword extraction using NLTK part-of-speech tagging.

Only nouns and verbs are kept. Short words and common words are discarded, the
rest are deduplicated in first-seen order and capped.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from nltk import pos_tag
from nltk.tokenize import RegexpTokenizer

from .nltk_resources import POS_TAGGER_RESOURCES, ensure_resource


Tagger = Callable[[List[str]], Sequence[Tuple[str, str]]]

COMMON_WORDS = frozenset([
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had", "her",
    "was", "one", "our", "out", "day", "get", "has", "him", "his", "how", "its",
    "may", "new", "now", "old", "see", "two", "way", "who", "boy", "did", "man", "try",
])

# Penn Treebank tag prefixes for nouns and verbs
KEPT_TAG_PREFIXES = ('NN', 'VB')

# Letter runs with an optional apostrophe suffix; digits and punctuation are dropped
WORD_PATTERN = r"[^\W\d_]+(?:'[^\W\d_]+)?"


class KeywordExtractor:
    """
    Salient noun/verb extraction.

    The tagger defaults to ``nltk.pos_tag``; its model data is located (and
    downloaded if allowed) on first use. A custom tagger can be injected.
    """

    def __init__(
        self,
        max_keywords: int = 5,
        min_length: int = 4,
        tagger: Optional[Tagger] = None,
        download_data: bool = True,
    ):
        self.max_keywords = max_keywords
        self.min_length = min_length
        self.download_data = download_data
        self.logger = logging.getLogger(__name__)
        self.tokenizer = RegexpTokenizer(WORD_PATTERN)

        self._tagger = tagger
        self._tagger_checked = tagger is not None

    def extract(self, text: str) -> Tuple[str, ...]:
        """
        Extract up to ``max_keywords`` keywords from text.

        Args:
            text: Task text

        Returns:
            Distinct lower-case keywords in first-seen order
        """
        tokens = self.tokenizer.tokenize(text)
        if not tokens or self.max_keywords <= 0:
            return ()

        tagged = self._tag(tokens)

        keywords: List[str] = []
        for word, tag in tagged:
            if not tag.startswith(KEPT_TAG_PREFIXES):
                continue
            word = word.lower()
            if len(word) < self.min_length or word in COMMON_WORDS or word in keywords:
                continue
            keywords.append(word)
            if len(keywords) >= self.max_keywords:
                break

        return tuple(keywords)

    def _tag(self, tokens: List[str]) -> Sequence[Tuple[str, str]]:
        tagger = self._get_tagger()
        if tagger is None:
            return []

        try:
            return tagger(tokens)
        except LookupError as e:
            self.logger.warning(f"POS tagging unavailable, skipping keywords: {e}")
            self._tagger = None
            return []

    def _get_tagger(self) -> Optional[Tagger]:
        if not self._tagger_checked:
            self._tagger_checked = True
            if ensure_resource(POS_TAGGER_RESOURCES, download=self.download_data):
                self._tagger = pos_tag
            else:
                self.logger.warning("POS tagger data not found, keywords will be empty")
        return self._tagger
