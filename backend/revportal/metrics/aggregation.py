"""Roll-ups used by the reporting views: channel summaries and portfolio averages."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal

from revportal.metrics.rounding import Number, round2, to_decimal

ZERO = Decimal(0)


def _value(record: object, field: str) -> Decimal:
    """Read ``field`` from a mapping or an object; missing and ``None`` count as 0."""
    if record is None:
        return ZERO
    if isinstance(record, Mapping):
        raw = record.get(field)
    else:
        raw = getattr(record, field, None)
    return ZERO if raw is None else to_decimal(raw)


def average(records: Sequence[object], field: str) -> Decimal:
    """Arithmetic mean of ``field`` across ``records``.

    Divides by ``max(len(records), 1)`` so an empty collection yields 0.
    A ``None`` record (e.g. a hotel with no data yet) contributes 0 but
    still counts toward the denominator.
    """
    total = sum((_value(r, field) for r in records), ZERO)
    return total / max(len(records), 1)


@dataclass(frozen=True)
class ChannelSummary:
    """Per-channel paid-media totals: sums for volume, means (to cents) for ratios."""

    channel: str
    records: int
    spend: Decimal
    clicks: int
    impressions: int
    roas: Decimal
    cpa: Decimal


def aggregate_by_channel(records: Iterable[object]) -> list[ChannelSummary]:
    """Group paid-media records by exact channel name, in first-seen order."""
    groups: dict[str, list[object]] = {}
    for record in records:
        channel = record["channel"] if isinstance(record, Mapping) else record.channel
        groups.setdefault(channel, []).append(record)

    return [
        ChannelSummary(
            channel=channel,
            records=len(items),
            spend=sum((_value(r, "spend") for r in items), ZERO),
            clicks=int(sum((_value(r, "clicks") for r in items), ZERO)),
            impressions=int(sum((_value(r, "impressions") for r in items), ZERO)),
            roas=round2(average(items, "roas")),
            cpa=round2(average(items, "cpa")),
        )
        for channel, items in groups.items()
    ]


@dataclass(frozen=True)
class ChannelTotals:
    total_spend: Decimal
    total_clicks: int
    total_impressions: int
    average_roas: Decimal
    average_cpa: Decimal


def channel_totals(summaries: Sequence[ChannelSummary]) -> ChannelTotals:
    """Headline figures across channels; ratio means are per channel, not per record."""
    return ChannelTotals(
        total_spend=sum((s.spend for s in summaries), ZERO),
        total_clicks=sum(s.clicks for s in summaries),
        total_impressions=sum(s.impressions for s in summaries),
        average_roas=round2(average(summaries, "roas")),
        average_cpa=round2(average(summaries, "cpa")),
    )


def calculate_variance(actual: Number, target: Number) -> Decimal:
    """Percent variance of ``actual`` against ``target``; 0 when there is no target."""
    target_dec = to_decimal(target)
    if target_dec == 0:
        return round2(ZERO)
    return round2((to_decimal(actual) - target_dec) / target_dec * 100)


def index_band(value: Number) -> str:
    """Classify an index: ``above`` at 100+, ``near`` from 95, otherwise ``below``."""
    dec = to_decimal(value)
    if dec >= 100:
        return "above"
    if dec >= 95:
        return "near"
    return "below"
