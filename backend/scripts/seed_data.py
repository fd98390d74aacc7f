"""Seed the database with the hotel portfolio and synthetic reporting data.

Creates the fifteen portfolio hotels, an administrator account, and for each
hotel twelve weeks plus three months of STR, web analytics and paid media
data, an annual strategy with four quarterly strategies and their tactics,
and four weekly updates. Derived STR columns go through revportal.metrics.

Run from the backend directory:
    python -m scripts.seed_data            # refuses if hotels already exist
    python -m scripts.seed_data --reset    # delete all hotels first
    python -m scripts.seed_data --seed 7   # reproducible numbers
"""

import argparse
import asyncio
import random
import sys
from datetime import date
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.auth.security import hash_password
from revportal.config import settings
from revportal.database import engine, unit_of_work
from revportal.models.hotel import Hotel
from revportal.models.marketing import PaidMediaData, WebAnalyticsData
from revportal.models.strategy import AnnualStrategy, QuarterlyStrategy, Tactic
from revportal.models.user import User
from revportal.models.weekly_update import WeeklyUpdate
from revportal.services import synthetic
from revportal.services.reporting_service import build_performance_record


async def ensure_admin(session: AsyncSession) -> User:
    """Create the seed administrator unless an account with that email exists."""
    result = await session.execute(select(User).where(User.email == settings.seed_admin_email))
    admin = result.scalar_one_or_none()
    if admin is not None:
        return admin

    admin = User(
        email=settings.seed_admin_email,
        hashed_password=hash_password(settings.seed_admin_password),
        full_name=settings.seed_admin_name,
        role="administrator",
        scope="corporate",
    )
    session.add(admin)
    await session.flush()
    return admin


async def seed_hotel(session: AsyncSession, hotel: Hotel, rng: random.Random, today: date) -> None:
    """Populate one hotel with every kind of reporting row."""
    luxury = hotel.brand == "virgin_limited_edition"
    periods = synthetic.reporting_periods(today, settings.seed_weeks, settings.seed_months)

    for period_type, start, end in periods:
        session.add(
            build_performance_record(hotel.id, period_type, start, end, synthetic.performance_inputs(rng, luxury))
        )
        session.add(
            WebAnalyticsData(
                hotel_id=hotel.id,
                period_type=period_type,
                period_start=start,
                period_end=end,
                **synthetic.web_analytics(rng, luxury),
            )
        )

    for channel in synthetic.PAID_MEDIA_CHANNELS:
        for period_type, start, end in periods:
            session.add(
                PaidMediaData(
                    hotel_id=hotel.id,
                    period_type=period_type,
                    period_start=start,
                    period_end=end,
                    **synthetic.paid_media(rng, luxury, channel),
                )
            )

    annual = AnnualStrategy(hotel_id=hotel.id, **synthetic.annual_strategy(rng, luxury, today.year))
    session.add(annual)
    await session.flush()

    for quarter in range(1, 5):
        quarterly = QuarterlyStrategy(
            hotel_id=hotel.id,
            annual_strategy_id=annual.id,
            **synthetic.quarterly_strategy(today.year, quarter),
        )
        session.add(quarterly)
        await session.flush()
        for tactic in synthetic.tactics(today.year, quarter):
            session.add(Tactic(hotel_id=hotel.id, quarterly_strategy_id=quarterly.id, **tactic))

    for weeks_ago in range(4):
        start, end = synthetic.week_bounds(today, weeks_ago)
        session.add(
            WeeklyUpdate(
                hotel_id=hotel.id,
                week_start=start,
                week_end=end,
                **synthetic.weekly_update(rng, luxury, 4 - weeks_ago),
            )
        )

    await session.flush()


async def seed(reset: bool = False, rng_seed: int | None = None) -> int:
    """Seed the portfolio. Returns the number of hotels created (0 if skipped)."""
    rng = random.Random(rng_seed)
    today = date.today()

    async with unit_of_work() as session:
        existing = (await session.execute(select(func.count()).select_from(Hotel))).scalar_one()
        if existing and not reset:
            print(f"⚠️  {existing} hotels already exist. Re-run with --reset to replace them.")
            return 0
        if existing:
            # Reporting rows and assignments go with their hotel via ON DELETE CASCADE
            await session.execute(delete(Hotel))
            await session.flush()
            print(f"🗑️  Deleted {existing} hotels and their data")

        admin = await ensure_admin(session)
        print(f"✅ Administrator: {admin.email}")

        for entry in synthetic.PORTFOLIO:
            hotel = Hotel(status="active", **entry)
            session.add(hotel)
            await session.flush()
            await seed_hotel(session, hotel, rng, today)
            print(f"   🏨 {hotel.name} — {hotel.location}")

    await engine.dispose()

    print()
    print("=" * 60)
    print(f"📊 Seeded {len(synthetic.PORTFOLIO)} hotels")
    print("=" * 60)
    print(f"🎉 Done! Log in at /api/v1/auth/login as {settings.seed_admin_email}")
    return len(synthetic.PORTFOLIO)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--reset", action="store_true", help="delete existing hotels and their data first")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible data")
    args = parser.parse_args(argv)
    asyncio.run(seed(reset=args.reset, rng_seed=args.seed))


if __name__ == "__main__":
    main()
