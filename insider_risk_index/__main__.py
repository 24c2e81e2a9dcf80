"""
Insider Risk Index — Command-line entry point

Usage:
    python -m insider_risk_index score --answers answers.json
    python -m insider_risk_index score --answers answers.json --industry healthcare --size 201-1000
    python -m insider_risk_index score --answers answers.json --config config.json --formats json
    python -m insider_risk_index questions [--category visibility]
    python -m insider_risk_index benchmarks
    python -m insider_risk_index matrix [--category identity-saas] [--refresh] [--no-cache]

The numeric Index never depends on the threat matrix feed; `matrix` only
shows enrichment context.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

# ---------------------------------------------------------------------------
# Engine imports
# ---------------------------------------------------------------------------
from . import __version__
from .cache import MemoryCache, SqliteCache
from .catalog import (
    CATEGORIES,
    INDUSTRY_BENCHMARKS,
    OVERALL_BENCHMARK,
    QUESTIONS,
    SIZE_BENCHMARKS,
    get_category,
)
from .config import EngineConfig
from .errors import InsiderRiskError
from .matrix import MatrixClient
from .reporting import export_json, export_summary
from .scoring import calculate_insider_risk_index, clamp_answers, load_answers

DEFAULT_CACHE_DIR = Path("./.insider_risk_cache")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="insider_risk_index",
        description="Insider Risk Index scoring and benchmarking engine",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # --- score ---
    score_p = subparsers.add_parser("score", help="Score an assessment from a JSON answers file")
    score_p.add_argument("--answers", "-a", type=Path, required=True, help="Path to answers JSON")
    score_p.add_argument("--industry", "-i", default="", help="Industry key (e.g. 'healthcare' or 'HEALTHCARE')")
    score_p.add_argument("--size", "-s", default="", help="Company size key (e.g. '201-1000' or 'MEDIUM_201_1000')")
    score_p.add_argument("--config", "-c", type=Path, help="Path to JSON configuration file")
    score_p.add_argument("--output-dir", "-o", type=Path, default=None, help="Output directory for reports")
    score_p.add_argument(
        "--formats",
        nargs="*",
        choices=["json", "markdown"],
        default=None,
        help="Output formats to generate (default: json markdown; none to skip)",
    )
    score_p.add_argument("--capability-bonus", action="store_true", help="Apply capability bonus rules")
    score_p.add_argument("--no-clamp", action="store_true", help="Score out-of-range values literally")

    # --- questions ---
    q_p = subparsers.add_parser("questions", help="List the assessment questions")
    q_p.add_argument("--category", default=None, help="Only list questions for this category id")

    # --- benchmarks ---
    subparsers.add_parser("benchmarks", help="List industry and company-size benchmarks")

    # --- matrix ---
    m_p = subparsers.add_parser("matrix", help="Show threat matrix enrichment")
    m_p.add_argument("--category", default=None, help="Show analysis for this category id")
    m_p.add_argument("--refresh", action="store_true", help="Bypass a fresh cache entry")
    m_p.add_argument("--no-cache", action="store_true", help="Use an in-memory cache only")
    m_p.add_argument("--cache-dir", type=Path, default=DEFAULT_CACHE_DIR, help="Persistent cache directory")
    m_p.add_argument("--config", "-c", type=Path, help="Path to JSON configuration file")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EngineConfig:
    """Build engine configuration from a config file and CLI overrides."""
    config_path = getattr(args, "config", None)
    if config_path and config_path.exists():
        config = EngineConfig.from_file(config_path)
    else:
        config = EngineConfig()

    # CLI overrides
    if getattr(args, "capability_bonus", False):
        config.scoring.capability_bonus = True
    if getattr(args, "no_clamp", False):
        config.scoring.clamp_out_of_range = False
    if getattr(args, "output_dir", None):
        config.output.base_dir = str(args.output_dir)
    if getattr(args, "formats", None) is not None:
        config.output.formats = list(args.formats)
    config.verbose = config.verbose or args.verbose

    return config


# ---------------------------------------------------------------------------
# score
# ---------------------------------------------------------------------------

def _cmd_score(args: argparse.Namespace) -> int:
    config = build_config(args)

    try:
        with open(args.answers, "r", encoding="utf-8") as fh:
            payload = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        print(f"\n❌ Could not read answers file {args.answers}: {e}")
        return 1

    try:
        answers = load_answers(payload)
    except InsiderRiskError as e:
        print(f"\n❌ Invalid answers: {e}")
        return 1

    if config.scoring.clamp_out_of_range:
        answers = clamp_answers(answers)

    assessment_id = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]

    print("=" * 70)
    print(f" Insider Risk Index v{__version__}")
    print("=" * 70)
    print(f"\n📋 Assessment ID: {assessment_id}")
    print(f"🏢 Industry:      {args.industry or 'not specified'}")
    print(f"👥 Company size:  {args.size or 'not specified'}")

    result = calculate_insider_risk_index(answers, args.industry, args.size, config)

    completeness = result.completeness
    if completeness.missing_questions:
        print(f"\n  ⚠  {len(completeness.missing_questions)} unanswered: "
              f"{', '.join(completeness.missing_questions)}")
    if completeness.unknown_questions:
        print(f"  ⚠  Ignored unknown questions: {', '.join(completeness.unknown_questions)}")
    if completeness.out_of_range:
        print(f"  ⚠  Out-of-range values: {', '.join(completeness.out_of_range)}")
    if completeness.off_option:
        print(f"  ⚠  Values not matching an option: {', '.join(completeness.off_option)}")

    print("\n" + "=" * 70)
    print(" RESULT")
    print("=" * 70 + "\n")
    print(f"  Insider Risk Index: {result.total_score:.2f}/100")
    print(f"  Level:              {result.level} ({result.level_name})")
    print(f"  Benchmark:          industry {result.benchmark.industry} | "
          f"size {result.benchmark.company_size} | overall {result.benchmark.overall}")
    print(f"  Percentile:         {result.percentile.overall}")
    print()
    for cs in result.category_scores:
        category = get_category(cs.category_id)
        name = category.name if category else cs.category_id
        print(f"    {name:40s} {cs.score:6.2f}/100 "
              f"(weight {cs.weight:.2f}, +{cs.contribution:.2f})")

    _print_list("Strengths", "✅", result.strengths)
    _print_list("Weaknesses", "⚠ ", result.weaknesses)
    _print_list("Recommendations", "➡ ", result.recommendations)

    formats = config.output.formats
    if formats:
        output_dir = config.output.output_dir
        print("\n" + "=" * 70)
        print(" REPORTS")
        print("=" * 70 + "\n")
        if "json" in formats:
            path = export_json(result, output_dir, assessment_id)
            print(f"  📄 JSON:       {path}")
        if "markdown" in formats:
            path = export_summary(result, output_dir, assessment_id, args.industry, args.size)
            print(f"  📝 Markdown:   {path}")
    print()
    return 0


def _print_list(title: str, glyph: str, items: list[str]) -> None:
    print(f"\n  {title}:")
    for item in items:
        print(f"    {glyph} {item}")


# ---------------------------------------------------------------------------
# questions / benchmarks
# ---------------------------------------------------------------------------

def _cmd_questions(args: argparse.Namespace) -> int:
    if args.category and get_category(args.category) is None:
        print(f"\n❌ Unknown category '{args.category}'. "
              f"Known: {', '.join(c.id for c in CATEGORIES)}")
        return 1

    for category in CATEGORIES:
        if args.category and category.id != args.category:
            continue
        print(f"\n{category.name} ({category.id}, weight {category.weight:.2f})")
        print(f"  {'─' * 66}")
        for q in QUESTIONS:
            if q.category_id != category.id:
                continue
            print(f"  [{q.id}] {q.prompt}")
            for opt in q.options:
                print(f"        {opt.value:5.0f}  {opt.label}")
    print()
    return 0


def _cmd_benchmarks(args: argparse.Namespace) -> int:
    print(f"\n  Overall average: {OVERALL_BENCHMARK.average_score} "
          f"({OVERALL_BENCHMARK.total_assessments} assessments)")

    print(f"\n  {'Industry':<22s} {'Average':>8s} {'Sample':>8s}")
    print(f"  {'─'*22} {'─'*8} {'─'*8}")
    for key, b in INDUSTRY_BENCHMARKS.items():
        print(f"  {key:<22s} {b.average_score:>8.1f} {b.sample_size:>8d}")

    print(f"\n  {'Company size':<22s} {'Average':>8s} {'Sample':>8s}")
    print(f"  {'─'*22} {'─'*8} {'─'*8}")
    for key, b in SIZE_BENCHMARKS.items():
        print(f"  {key:<22s} {b.average_score:>8.1f} {b.sample_size:>8d}")
    print()
    return 0


# ---------------------------------------------------------------------------
# matrix
# ---------------------------------------------------------------------------

async def _cmd_matrix(args: argparse.Namespace) -> int:
    config = build_config(args)
    ttl = config.matrix.cache_ttl_hours
    cache = MemoryCache(ttl) if args.no_cache else SqliteCache(args.cache_dir, ttl)

    async with MatrixClient(config.matrix, cache=cache) as client:
        data = await (client.refresh() if args.refresh else client.get_matrix_data())
        if not data.available:
            print("\n  ⚠  Threat matrix unavailable; scoring is unaffected.")

        if args.category:
            if get_category(args.category) is None:
                print(f"\n❌ Unknown category '{args.category}'.")
                return 1
            analysis = await client.category_analysis(args.category)
            print(f"\n  {args.category}: {analysis['related_techniques']} related techniques")
            for tech in analysis["techniques"]:
                print(f"    • [{tech['id']}] {tech['name']} ({tech['theme']})")
            if analysis["recommendations"]:
                print("\n  Recommendations:")
                for rec in analysis["recommendations"]:
                    print(f"    ➡  {rec}")
        else:
            stats = await client.stats()
            print(f"\n  Source:      {data.source}")
            print(f"  Techniques:  {stats['total_techniques']}")
            for theme, count in stats["themes"].items():
                print(f"    {theme:<14s} {count}")
            print(f"  Updated:     {stats['last_updated']}")
    print()
    return 0


async def main_async(argv: Optional[Sequence[str]] = None) -> int:
    """Async entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    if args.command == "score":
        return _cmd_score(args)
    if args.command == "questions":
        return _cmd_questions(args)
    if args.command == "benchmarks":
        return _cmd_benchmarks(args)
    if args.command == "matrix":
        return await _cmd_matrix(args)

    print("Usage: python -m insider_risk_index {score|questions|benchmarks|matrix} [options]")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Synchronous entry point for `python -m insider_risk_index`."""
    return asyncio.run(main_async(argv))


if __name__ == "__main__":
    sys.exit(main())
