"""Unit tests for channel roll-ups, portfolio averages, variance and index bands."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from revportal.metrics import aggregate_by_channel, average, calculate_variance, channel_totals, index_band


def _paid(channel, spend, roas, cpa, clicks=100, impressions=1000):
    return {"channel": channel, "spend": spend, "roas": roas, "cpa": cpa, "clicks": clicks, "impressions": impressions}


class TestAggregateByChannel:
    """Sums for volume, means for ratios, grouped by exact channel name."""

    def test_empty_input(self):
        assert aggregate_by_channel([]) == []

    def test_single_channel(self):
        records = [_paid("Google", 100, 4, 20), _paid("Google", 250.5, 6, 30), _paid("Google", 49.5, 5, 40)]
        [summary] = aggregate_by_channel(records)
        assert summary.channel == "Google"
        assert summary.records == 3
        assert summary.spend == Decimal("400.0")
        assert summary.roas == Decimal(5)
        assert summary.cpa == Decimal(30)
        assert summary.clicks == 300
        assert summary.impressions == 3000

    def test_groups_in_first_seen_order(self):
        records = [_paid("Meta", 1, 1, 1), _paid("Google", 2, 2, 2), _paid("Meta", 3, 3, 3)]
        assert [s.channel for s in aggregate_by_channel(records)] == ["Meta", "Google"]

    def test_channel_names_are_case_sensitive(self):
        records = [_paid("google", 1, 1, 1), _paid("Google", 1, 1, 1)]
        assert len(aggregate_by_channel(records)) == 2

    def test_reads_attributes_and_treats_none_as_zero(self):
        records = [
            SimpleNamespace(channel="Bing", spend=Decimal("10"), roas=None, cpa=Decimal(5), clicks=None, impressions=7),
            SimpleNamespace(channel="Bing", spend=None, roas=Decimal(4), cpa=Decimal(3), clicks=2, impressions=None),
        ]
        [summary] = aggregate_by_channel(records)
        assert summary.spend == Decimal(10)
        assert summary.roas == Decimal(2)
        assert summary.clicks == 2
        assert summary.impressions == 7

    def test_ratio_means_are_rounded_to_cents(self):
        records = [_paid("Meta", 1, 1, 10), _paid("Meta", 1, 1, 0), _paid("Meta", 1, 2, 0)]
        [summary] = aggregate_by_channel(records)
        assert summary.roas == Decimal("1.33")
        assert summary.cpa == Decimal("3.33")
        assert summary.cpa.as_tuple().exponent == -2


class TestChannelTotals:
    def test_totals_across_channels(self):
        summaries = aggregate_by_channel([_paid("Google", 100, 4, 20), _paid("Meta", 300, 8, 10)])
        totals = channel_totals(summaries)
        assert totals.total_spend == Decimal(400)
        assert totals.total_clicks == 200
        assert totals.average_roas == Decimal(6)
        assert totals.average_cpa == Decimal(15)

    def test_empty(self):
        totals = channel_totals([])
        assert totals.total_spend == 0
        assert totals.average_roas == 0


class TestAverage:
    """Divides by max(count, 1)."""

    def test_empty_list_is_zero(self):
        result = average([], "occupancy_actual")
        assert result == 0
        assert not result.is_nan()

    def test_mean_of_mappings(self):
        assert average([{"v": 10}, {"v": 20}, {"v": 33}], "v") == Decimal(21)

    def test_missing_record_counts_as_zero(self):
        assert average([{"v": 90}, None], "v") == Decimal(45)


class TestCalculateVariance:
    def test_positive_and_negative(self):
        assert calculate_variance(110, 100) == Decimal("10.00")
        assert calculate_variance(Decimal("187.20"), Decimal("200.00")) == Decimal("-6.40")

    def test_zero_target_is_zero(self):
        assert calculate_variance(50, 0) == Decimal("0.00")


class TestIndexBand:
    @pytest.mark.parametrize(
        ("value", "band"),
        [
            (Decimal("100.00"), "above"),
            (Decimal("113.38"), "above"),
            (Decimal("95"), "near"),
            (Decimal("99.99"), "near"),
            (Decimal("94.99"), "below"),
            (0, "below"),
        ],
    )
    def test_bands(self, value, band):
        assert index_band(value) == band
