"""Synthetic portfolio data for demos and local development.

Every generator takes an injected ``random.Random`` so output is
reproducible under a fixed seed. Performance rows are returned as plain
input dicts; their dependent columns are derived through
:mod:`revportal.metrics` by the caller, never computed here.
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from revportal.metrics import round2

PORTFOLIO: list[dict[str, str]] = [
    {"name": "Virgin Hotels Dallas", "location": "Dallas, TX", "brand": "virgin_hotels", "region": "US"},
    {"name": "Virgin Hotels Edinburgh", "location": "Edinburgh", "brand": "virgin_hotels", "region": "UK"},
    {"name": "Virgin Hotels London-Shoreditch", "location": "London", "brand": "virgin_hotels", "region": "UK"},
    {"name": "Virgin Hotels Nashville", "location": "Nashville, TN", "brand": "virgin_hotels", "region": "US"},
    {"name": "Virgin Hotels New Orleans", "location": "New Orleans, LA", "brand": "virgin_hotels", "region": "US"},
    {"name": "Virgin Hotels New York", "location": "New York, NY", "brand": "virgin_hotels", "region": "US"},
    {"name": "Necker Island", "location": "British Virgin Islands", "brand": "virgin_limited_edition", "region": "Caribbean"},
    {"name": "The Branson Beach Estate", "location": "British Virgin Islands", "brand": "virgin_limited_edition", "region": "Caribbean"},
    {"name": "Kasbah Tamadot", "location": "Morocco", "brand": "virgin_limited_edition", "region": "Africa"},
    {"name": "Mahali Mzuri", "location": "Kenya", "brand": "virgin_limited_edition", "region": "Africa"},
    {"name": "Finch Hattons", "location": "Kenya", "brand": "virgin_limited_edition", "region": "Africa"},
    {"name": "Ulusaba", "location": "South Africa", "brand": "virgin_limited_edition", "region": "Africa"},
    {"name": "Mont Rochelle", "location": "South Africa", "brand": "virgin_limited_edition", "region": "Africa"},
    {"name": "Son Bunyola", "location": "Mallorca", "brand": "virgin_limited_edition", "region": "Europe"},
    {"name": "The Lodge", "location": "Switzerland", "brand": "virgin_limited_edition", "region": "Europe"},
]

PAID_MEDIA_CHANNELS = ("Google", "Meta", "Bing", "TripAdvisor")


def _money(value: float) -> Decimal:
    return round2(Decimal(repr(value)))


# ---------------------------------------------------------------------------
# Periods
# ---------------------------------------------------------------------------


def week_bounds(today: date, weeks_ago: int) -> tuple[date, date]:
    """Sunday-to-Saturday week, ``weeks_ago`` weeks before the current one."""
    start = today - timedelta(days=(today.weekday() + 1) % 7 + 7 * weeks_ago)
    return start, start + timedelta(days=6)


def month_bounds(today: date, months_ago: int) -> tuple[date, date]:
    """First and last day of the calendar month ``months_ago`` before today's."""
    index = today.year * 12 + today.month - 1 - months_ago
    start = date(index // 12, index % 12 + 1, 1)
    following = date((index + 1) // 12, (index + 1) % 12 + 1, 1)
    return start, following - timedelta(days=1)


def reporting_periods(today: date, weeks: int = 12, months: int = 3) -> list[tuple[str, date, date]]:
    """The recent weekly then monthly periods the seed populates, newest first."""
    periods = [("weekly", *week_bounds(today, i)) for i in range(weeks)]
    periods += [("monthly", *month_bounds(today, i)) for i in range(months)]
    return periods


# ---------------------------------------------------------------------------
# Metric rows
# ---------------------------------------------------------------------------


def performance_inputs(rng: random.Random, luxury: bool) -> dict[str, Decimal]:
    """Occupancy and ADR for the four scenarios, around a brand-typical baseline."""
    occupancy = rng.uniform(40, 70) if luxury else rng.uniform(70, 85)
    adr = rng.uniform(800, 2500) if luxury else rng.uniform(200, 350)
    return {
        "occupancy_actual": _money(occupancy + rng.uniform(-5, 5)),
        "occupancy_budget": _money(occupancy),
        "occupancy_prior_year": _money(occupancy + rng.uniform(-3, 3)),
        "occupancy_comp_set": _money(occupancy + rng.uniform(-8, 8)),
        "adr_actual": _money(adr + rng.uniform(-20, 30)),
        "adr_budget": _money(adr),
        "adr_prior_year": _money(adr * 0.95),
        "adr_comp_set": _money(adr + rng.uniform(-50, 50)),
    }


def web_analytics(rng: random.Random, luxury: bool) -> dict[str, object]:
    """Sessions split across traffic sources; referral takes the remainder."""
    sessions = (rng.randint(5000, 15000) if luxury else rng.randint(20000, 50000)) + rng.randint(-2000, 2000)
    organic = round(sessions * rng.uniform(0.3, 0.45))
    paid = round(sessions * rng.uniform(0.15, 0.25))
    direct = round(sessions * rng.uniform(0.2, 0.35))
    return {
        "sessions": sessions,
        "users": round(sessions * rng.uniform(0.7, 0.85)),
        "bounce_rate": _money(rng.uniform(35, 55)),
        "booking_engine_conversion_rate": _money(rng.uniform(0.5, 2) if luxury else rng.uniform(1.5, 4)),
        "revenue_direct_bookings": _money(rng.uniform(50000, 200000) if luxury else rng.uniform(100000, 500000)),
        "traffic_organic": organic,
        "traffic_paid": paid,
        "traffic_direct": direct,
        "traffic_referral": sessions - organic - paid - direct,
    }


def paid_media(rng: random.Random, luxury: bool, channel: str) -> dict[str, object]:
    """One channel's spend and funnel; CPA is 0 when no conversions are drawn."""
    spend = (rng.uniform(5000, 15000) if luxury else rng.uniform(10000, 30000)) + rng.uniform(-2000, 2000)
    impressions = rng.randint(100000, 500000)
    ctr = rng.uniform(1.5, 4)
    clicks = round(impressions * ctr / 100)
    conversions = round(clicks * rng.uniform(0.02, 0.08))
    return {
        "channel": channel,
        "spend": _money(spend),
        "roas": _money(rng.uniform(3, 8)),
        "cpa": _money(spend / conversions) if conversions else Decimal("0.00"),
        "impressions": impressions,
        "clicks": clicks,
        "ctr": _money(ctr),
    }


# ---------------------------------------------------------------------------
# Strategy rows
# ---------------------------------------------------------------------------

_SEASONS = (
    "Peak winter season focus",
    "Shoulder season optimization",
    "Summer programming",
    "Holiday season preparations",
)
_CAMPAIGNS = ("spring break", "summer", "fall", "holiday")


def annual_strategy(rng: random.Random, luxury: bool, year: int) -> dict[str, object]:
    if luxury:
        texts = {
            "strategy_summary": "Focus on ultra-luxury experiences, exclusive access, and personalized service "
            "to maintain premium positioning and attract high-net-worth travelers.",
            "sales_strategy": "Develop relationships with luxury travel advisors and concierge services. "
            "Focus on exclusive packages and private buyouts.",
            "rm_strategy": "Maintain rate integrity with dynamic pricing based on demand patterns. "
            "Focus on length of stay optimization and premium add-ons.",
            "ecommerce_strategy": "Enhance digital storytelling, improve high-end booking experience, "
            "and leverage social proof from guest reviews.",
        }
    else:
        texts = {
            "strategy_summary": "Drive occupancy growth through strategic rate optimization, enhanced digital "
            "presence, and targeted corporate partnerships while maintaining brand standards.",
            "sales_strategy": "Expand corporate accounts, develop group business, and strengthen OTA "
            "partnerships while growing direct bookings.",
            "rm_strategy": "Implement aggressive yield management, optimize channel mix, and develop "
            "promotional strategies for low-demand periods.",
            "ecommerce_strategy": "Increase website conversion rates, expand retargeting campaigns, and "
            "optimize mobile booking experience.",
        }
    return {
        "year": year,
        **texts,
        "revenue_goal": _money(rng.uniform(5e6, 2e7) if luxury else rng.uniform(1.5e7, 5e7)),
        "revpar_goal": _money(rng.uniform(800, 2000) if luxury else rng.uniform(180, 300)),
        "market_share_goal": _money(rng.uniform(18, 28)),
    }


def quarterly_strategy(year: int, quarter: int) -> dict[str, object]:
    corporate_quarter = quarter in (1, 4)
    return {
        "year": year,
        "quarter": quarter,
        "strategy_summary": f"Q{quarter} {year}: {_SEASONS[quarter - 1]}",
        "sales_initiatives": f"Focus on {'corporate accounts' if corporate_quarter else 'leisure segments'} "
        "with targeted outreach and promotional packages.",
        "rm_initiatives": f"{'Drive midweek occupancy' if corporate_quarter else 'Optimize weekend rates'} "
        "through strategic pricing and promotions.",
        "ecommerce_initiatives": f"Launch {_CAMPAIGNS[quarter - 1]} campaign with enhanced landing pages "
        "and retargeting.",
    }


def tactics(year: int, quarter: int) -> list[dict[str, object]]:
    """Six tactics per quarter, two per discipline, due mid-month across the quarter."""
    rows = [
        ("sales", f"Execute targeted outreach to top 20 corporate accounts with Q{quarter} promotional offers",
         "completed" if quarter < 4 else "in_progress", "Generate 50 new RFPs"),
        ("sales", "Host property showcase event for local travel advisors",
         "completed" if quarter < 3 else "not_started", "25 advisor attendees, 10 follow-up bookings"),
        ("revenue_management", "Implement dynamic pricing model for weekend rates",
         "completed", "Increase weekend ADR by 8%"),
        ("revenue_management", "Develop length-of-stay restrictions for high-demand dates",
         "in_progress", "Improve RevPAR by 5%"),
        ("ecommerce", "Launch retargeting campaign for abandoned bookings",
         "completed", "Recover 15% of abandoned carts"),
        ("ecommerce", "A/B test new booking engine layout",
         "in_progress" if quarter == 4 else "completed", "Increase conversion rate by 0.5%"),
    ]
    return [
        {
            "discipline": discipline,
            "description": description,
            "status": status,
            "kpi_target": kpi_target,
            "due_date": date(year, (quarter - 1) * 3 + i // 2 + 1, 15 + i),
        }
        for i, (discipline, description, status, kpi_target) in enumerate(rows)
    ]


def weekly_update(rng: random.Random, luxury: bool, week_number: int) -> dict[str, str]:
    direct_revenue = f"${rng.randint(30, 80)}K" if luxury else f"${rng.randint(80, 150)}K"
    return {
        "str_summary": f"Week {week_number}: {'Strong luxury demand' if luxury else 'Solid performance'} with "
        f"occupancy {'above 60%' if luxury else 'above 78%'}. ADR "
        f"{'exceeded' if rng.random() > 0.5 else 'tracking to'} budget. RGI at {rng.randint(95, 108)}.",
        "web_analytics_summary": f"Sessions {'up' if rng.random() > 0.33 else 'down'} {rng.randint(2, 12)}% WoW. "
        f"Conversion rate at {rng.uniform(1.8, 3.2):.1f}%. Direct booking revenue {direct_revenue}.",
        "paid_media_summary": f"ROAS at {rng.uniform(4, 7):.1f}x across channels. Google performing "
        f"{'above' if rng.random() > 0.5 else 'at'} benchmark. Meta campaigns driving awareness.",
        "tactics_deployed": f"Launched {rng.randint(2, 4)} new initiatives this week including rate promotions "
        "and email campaigns.",
        "whats_working": f"{'Exclusive experiences driving premium ADR' if luxury else 'Corporate rate programs generating volume'}. "
        "Email campaigns showing strong engagement.",
        "whats_not_working": f"{'Social media reach declining' if luxury else 'OTA reliance still high'}. "
        "Need to address underperforming paid channels.",
        "adjustments_planned": f"Reallocating {rng.randint(10, 25)}% of paid media budget to higher-performing "
        "channels. Testing new promotional offers.",
        "promotions_in_market": f"{'Exclusive package with spa credits' if luxury else 'Book 3+ nights save 20% promotion'}. "
        "Early bird rates for upcoming events.",
    }
