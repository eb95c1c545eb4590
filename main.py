#!/usr/bin/env python3
"""
Nodule Follow-up Recommendation CLI
===================================

Reads a radiology report sentence describing a lung nodule and prints the
extracted descriptor, size, category and follow-up recommendation.

Usage:
    python main.py "Solid nodule measuring 7 x 8 mm."
    python main.py --json "Solid nodule measuring 7 x 8 mm."
    python main.py --insert "Solid nodule measuring 7 x 8 mm."
    python main.py --file sentences.txt
    echo "Solid nodule measuring 7 x 8 mm." | python main.py
    python main.py --demo
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from config import LOG_FORMAT, LOG_LEVEL
from nlp.errors import NoduleExtractionError
from orchestrator import classify_many, format_summary, format_insertion

logger = logging.getLogger(__name__)

DEMO_SENTENCES = [
    "Incidental right upper lobe solid noncalcified pulmonary nodule measuring 7 x 8 mm (series 1, image 30).",
    "Multiple bilateral groundglass pulmonary nodules, largest measuring 1.5 x 1.5 cm in the left lower lobe.",
    "Part solid nodule in the right middle lobe with groundglass and solid components. "
    "The solid component measures 6 x 4 x 8 mm.",
    "Incidental right upper lobe calcified pulmonary nodule measuring 5 mm.",
    "There is no finding of note.",
    "A pulmonary nodule is noted without measurable size.",
]


def render(outcome, as_json: bool, insert_only: bool) -> str:
    """Render one successful result for stdout."""
    if as_json:
        return json.dumps(outcome.to_dict(), indent=2)
    if insert_only:
        return format_insertion(outcome).lstrip()
    return format_summary(outcome)


def run(lines: List[str], as_json: bool = False, insert_only: bool = False) -> int:
    """
    Classify each line and print the results.

    Returns:
        0 if every line was classified, 1 if any line failed
    """
    failures = 0
    blocks = []
    for line, outcome in classify_many(lines):
        if isinstance(outcome, NoduleExtractionError):
            failures += 1
            print(f"Error ({outcome.kind}): {outcome.message}", file=sys.stderr)
            continue
        blocks.append(render(outcome, as_json, insert_only))

    separator = "\n" if insert_only else "\n\n"
    if blocks:
        print(separator.join(blocks))

    if failures:
        logger.info("%d input(s) could not be classified", failures)
    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Lung nodule follow-up recommendation from report text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py "Solid nodule measuring 7 x 8 mm."   Print summary
    python main.py --json "..."                          Print JSON result
    python main.py --insert "..."                        Print text to append
    python main.py --file report_sentences.txt           One sentence per line
    python main.py --demo                                Run example sentences
        """
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Sentence to classify (read from stdin if omitted)"
    )
    parser.add_argument(
        "--file", "-f",
        type=str,
        help="Classify each line of a text file"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    parser.add_argument(
        "--insert",
        action="store_true",
        help="Print only the recommendation text to append to the report"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Classify a set of example sentences"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.json and args.insert:
        parser.error("--json and --insert are mutually exclusive")
    if args.file and args.text:
        parser.error("give either a sentence or --file, not both")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT
    )

    if args.demo:
        lines = DEMO_SENTENCES
    elif args.file:
        with open(args.file, encoding="utf-8") as f:
            lines = f.read().splitlines()
    elif args.text:
        lines = [" ".join(args.text)]
    else:
        lines = [sys.stdin.read().replace("\n", " ")]

    return run(lines, as_json=args.json, insert_only=args.insert)


if __name__ == "__main__":
    sys.exit(main())
