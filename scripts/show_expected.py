#!/usr/bin/env python3
"""
Print the expected-purchases list for a household.

Usage:
    DATABASE_URL=postgresql://... python scripts/show_expected.py <household_id>
"""
import sys
import os
import asyncio
from uuid import UUID

# Add parent directory to path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lijstje.common.database import get_db_session, sessionmanager
from lijstje.common.logging_config import configure_logging
from lijstje.domain.cadence import expected_purchases_service


async def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/show_expected.py <household_id>")
        sys.exit(1)

    configure_logging(json=False)
    household_id = UUID(sys.argv[1])

    async for db in get_db_session():
        expected = await expected_purchases_service.get_expected(household_id, db)

    if not expected:
        print("Nothing expected for this household.")
    for product in expected:
        print(f'{product.emoji}  {product.name}')
        print(f'    → Category: {product.category_name or "-"}')
        print(f'    → Every {product.frequency_days:.1f} days, due in {product.days_until_expected} day(s)')

    await sessionmanager.close()


if __name__ == "__main__":
    asyncio.run(main())
