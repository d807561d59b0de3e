#!/usr/bin/env python3
"""
Command-line entry point for the Task Text Analyzer.

Analyzes task descriptions given on the command line or in a file (one task per
line) and prints a report or writes the results as JSON.
"""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .analyzer import TaskTextAnalyzer
from .assistant import format_duration
from .config.settings import load_settings


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Setup logging configuration."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def analyze_texts(
    texts: List[str],
    analyzer: TaskTextAnalyzer,
    now: datetime,
) -> List[Dict[str, Any]]:
    """
    Analyze each text against the same reference time.

    Args:
        texts: Task descriptions
        analyzer: Configured analyzer
        now: Reference time

    Returns:
        One dictionary per text with the input and its analysis
    """
    return [
        {'text': text, 'analysis': analyzer.analyze(text, now).to_dict()}
        for text in texts
    ]


def format_report(results: List[Dict[str, Any]]) -> str:
    """Render analyses as a human-readable report."""
    lines = []
    for index, item in enumerate(results, start=1):
        analysis = item['analysis']
        lines.append(f"Task {index}: \"{item['text']}\"")
        lines.append(f"   Due Date: {analysis['due_date'] or 'None'}")
        lines.append(f"   Priority: {analysis['priority']}")
        lines.append(f"   Category: {analysis['category']}")
        lines.append(f"   Duration: {format_duration(analysis['estimated_duration'])}")
        lines.append(f"   Keywords: {', '.join(analysis['keywords'])}")
        lines.append(f"   Sentiment: {analysis['sentiment_score']:.2f}")
    return '\n'.join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyze free-text task descriptions",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Task description to analyze"
    )

    parser.add_argument(
        "--input", "-i",
        help="Path to a text file with one task description per line"
    )

    parser.add_argument(
        "--output", "-o",
        help="Path for output JSON file"
    )

    parser.add_argument(
        "--now",
        help="Reference time in ISO-8601 format (default: current time)"
    )

    parser.add_argument(
        "--config", "-c",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    if not settings.validate():
        return 1

    texts = []
    if args.text:
        texts.append(' '.join(args.text))

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            logger.error(f"Input file not found: {args.input}")
            return 1
        with open(input_path, 'r', encoding='utf-8') as f:
            texts.extend(line.strip() for line in f if line.strip())

    if not texts:
        parser.print_usage()
        logger.error("No task text given")
        return 1

    if args.now:
        try:
            now = datetime.fromisoformat(args.now)
        except ValueError:
            logger.error(f"Invalid --now value, expected ISO-8601: {args.now}")
            return 1
    else:
        now = datetime.now()

    analyzer = TaskTextAnalyzer(settings.analyzer)
    results = analyze_texts(texts, analyzer, now)
    logger.info(f"Analyzed {len(results)} task(s) against {now.isoformat()}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
        logger.info(f"Results saved to {args.output}")
    else:
        print(format_report(results))

    return 0


if __name__ == "__main__":
    exit(main())
