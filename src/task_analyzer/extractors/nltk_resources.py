"""Lookup and on-demand download of the NLTK data packages the extractors need."""

import logging
from typing import Sequence, Tuple

import nltk


logger = logging.getLogger(__name__)

# (resource path for nltk.data.find, package name for nltk.download).
# Newer NLTK releases ship the tagger as the "_eng" package.
POS_TAGGER_RESOURCES = (
    ('taggers/averaged_perceptron_tagger_eng', 'averaged_perceptron_tagger_eng'),
    ('taggers/averaged_perceptron_tagger', 'averaged_perceptron_tagger'),
)
VADER_RESOURCES = (
    ('sentiment/vader_lexicon.zip', 'vader_lexicon'),
)


def ensure_resource(candidates: Sequence[Tuple[str, str]], download: bool = True) -> bool:
    """
    Make sure one of the candidate NLTK resources is available.

    Args:
        candidates: (resource path, package name) pairs, tried in order
        download: Download the first candidate if none is installed

    Returns:
        True if a resource is available afterwards
    """
    for path, _ in candidates:
        try:
            nltk.data.find(path)
            return True
        except LookupError:
            continue

    if not download:
        return False

    for path, package in candidates:
        logger.info(f"Downloading NLTK resource {package}")
        if nltk.download(package, quiet=True):
            try:
                nltk.data.find(path)
                return True
            except LookupError:
                continue

    logger.warning(f"NLTK resource unavailable: {', '.join(p for _, p in candidates)}")
    return False
