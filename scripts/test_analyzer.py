#!/usr/bin/env python3
"""
Manual end-to-end check of the analysis paths.

Usage:
    ./venv/bin/python scripts/test_analyzer.py
"""

import json
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from reviewsense.core import ReviewAnalystError, setup_logging
from reviewsense.engine.summarizer import RuleBasedSummarizer
from reviewsense.prompts.templates import BASIC_SUMMARY_PROMPT, SUMMARY_PROMPT
from reviewsense.service import ReviewAnalysisService
from reviewsense.utils.config import get_settings


SAMPLE_TEXT = """Excellent build quality and amazing battery. I use it every day.
Terrible customer service, very disappointing. Took three weeks to get a reply.
Good sound for the price, but the fit is a little loose during workouts.
The design is great and the packaging was perfect, would recommend to friends.
"""

SAMPLE_URLS = [
    "https://www.amazon.com/dp/B0EXAMPLE1",
    "https://www.ebay.com/itm/1234567890",
    "https://shop.example.org/products/42",
]


def print_report(title: str, report: dict) -> None:
    print("\n" + "─" * 50)
    print(title)
    print("─" * 50)
    print(json.dumps(report, indent=2, ensure_ascii=False))


def main():
    load_dotenv()
    settings = get_settings()
    setup_logging(settings.log_level)

    print("=" * 60)
    print("Review analysis check")
    print("=" * 60)

    print("\nStep 1: summary prompts")
    for prompt in (SUMMARY_PROMPT, BASIC_SUMMARY_PROMPT):
        print(f"   - {prompt.name}: {prompt.description} (v{prompt.version})")

    print(f"\nStep 2: OpenAI key configured: {settings.has_openai_key}")
    print(f"   AI summarizer enabled: {settings.use_ai_summarizer}")

    service = ReviewAnalysisService(settings)
    rule_service = ReviewAnalysisService(settings, summarizer=RuleBasedSummarizer())

    try:
        print_report("Step 3: pasted text (configured summarizer)", service.analyze_text(SAMPLE_TEXT).to_dict())
        print_report("Step 4: pasted text (rule-based)", rule_service.analyze_text(SAMPLE_TEXT).to_dict())

        for url in SAMPLE_URLS:
            print_report(f"Step 5: URL {url}", rule_service.analyze_url(url).to_dict())
    except ReviewAnalystError as e:
        print(f"\nAnalysis failed: {e}")
        return

    print("\n" + "=" * 60)
    print("Review analysis check complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
