"""
Task Text Analyzer

Rule-based natural-language interpretation of free-text task descriptions into
structured attributes: due date, priority, category, duration, keywords and
sentiment.
"""

from .analyzer import TaskTextAnalyzer, analyze
from .models import AnalysisResult, Category, Priority

__version__ = "1.0.0"
__author__ = "AI Agent Developer"
__description__ = "Natural-language task analyzer for task creation flows"

__all__ = ['TaskTextAnalyzer', 'analyze', 'AnalysisResult', 'Category', 'Priority']
