"""Process route assignments for a selection period from the command line.

Usage:
    python -m routebid.tools.process_period 12
    python -m routebid.tools.process_period 12 --preview
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from routebid.adapters.persistence.database import async_session_factory, engine
from routebid.application.use_cases.process_period import ProcessingResult
from routebid.domain.errors import AssignmentValidationError, RouteBidError
from routebid.infrastructure.api.dependencies import build_process_period_uc

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def process(period_id: int, preview: bool = False) -> ProcessingResult:
    try:
        async with async_session_factory() as session:
            uc = build_process_period_uc(session)
            return await uc.execute(period_id, preview=preview)
    finally:
        await engine.dispose()


def _print_summary(result: ProcessingResult) -> None:
    s = result.summary
    dist = s.choice_distribution
    print(f"\n{'='*50}")
    print(f"ASSIGNMENT SUMMARY (period {result.selection_period_id}{', preview' if result.preview else ''})")
    print(f"{'='*50}")
    print(f"Total employees: {s.total_employees}")
    print(f"Routes assigned: {s.assigned_routes}/{s.total_routes}")
    print(f"Float pool:      {s.float_pool_employees}")
    print(f"1st choice:      {dist['first']}")
    print(f"2nd choice:      {dist['second']}")
    print(f"3rd choice:      {dist['third']}")
    print(f"{'='*50}\n")


def main():
    parser = argparse.ArgumentParser(description="Run seniority route assignment for a selection period")
    parser.add_argument("period_id", type=int, help="Selection period id")
    parser.add_argument(
        "--preview", action="store_true",
        help="Compute and validate assignments without saving them",
    )
    args = parser.parse_args()

    try:
        result = asyncio.run(process(args.period_id, preview=args.preview))
    except AssignmentValidationError as e:
        logger.error("Assignment validation failed:")
        for error in e.errors:
            logger.error("  %s", error)
        sys.exit(2)
    except RouteBidError as e:
        logger.error("%s", e)
        sys.exit(1)

    _print_summary(result)


if __name__ == "__main__":
    main()
