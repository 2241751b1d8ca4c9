"""
Unit tests for the per-tier comparison and its chart.
"""

from dataclasses import replace

import pytest

from engine import compare_tiers, recompute, tier_comparison_rows
from utils.plotting import create_tier_roi_figure


class TestCompareTiers:

    def test_one_result_per_tier(self, default_state, tiers):
        comparison = compare_tiers(default_state)

        assert len(comparison) == 11
        assert [tier for tier, _ in comparison] == list(tiers)

    def test_selected_tier_matches_recompute(self, default_state, tiers):
        state = replace(default_state, selected_tier=tiers[4])
        comparison = dict(compare_tiers(state))

        assert comparison[tiers[4]] == recompute(state)

    def test_roi_falls_as_tier_price_rises(self, default_state):
        state = replace(default_state, future_price=1.0)
        roi = [results.total_roi_percent for _, results in compare_tiers(state)]

        assert all(a > b for a, b in zip(roi, roi[1:]))

    def test_state_is_left_alone(self, default_state):
        compare_tiers(default_state)
        assert default_state.selected_tier.stage == 1


class TestComparisonRows:

    def test_rows_flag_selected_stage(self, default_state):
        rows = tier_comparison_rows(compare_tiers(default_state), selected_stage=3)

        assert len(rows) == 11
        assert [row["stage"] for row in rows if row["selected"]] == [3]

    def test_row_values(self, default_state):
        row = tier_comparison_rows(compare_tiers(default_state), selected_stage=1)[0]

        assert row["name"] == "Early Investor"
        assert row["price"] == 0.015
        assert row["tokens_received"] == pytest.approx(25000 / 0.015)
        assert row["total_roi_percent"] == pytest.approx(3233.33, abs=0.01)


class TestRoiFigure:

    def test_bar_per_tier_with_selected_highlight(self, default_state):
        figure = create_tier_roi_figure(compare_tiers(default_state), selected_stage=2)
        bar = figure.data[0]

        assert len(bar.x) == 11
        assert bar.marker.color[1] == "#27ae60"
        assert bar.marker.color[0] != bar.marker.color[1]

    def test_zero_investment_shows_placeholder(self, default_state):
        state = replace(default_state, investment_amount=0.0)
        figure = create_tier_roi_figure(compare_tiers(state), selected_stage=1)

        assert len(figure.data) == 0
        assert figure.layout.annotations[0].text == "No data available"

    def test_empty_comparison(self):
        figure = create_tier_roi_figure([], selected_stage=1)
        assert figure.layout.annotations[0].text == "No data available"
