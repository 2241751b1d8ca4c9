"""
Unit tests for the calculator callback bodies and the page wiring.
"""

import math

import pytest
from dash import no_update
from dash.exceptions import PreventUpdate

from callbacks.calculator_callbacks import mask_investment_amount, recalculate, render_results
from engine import recompute
from layout.results_layout import get_result_ids


def _tiles(outputs):
    return dict(zip(get_result_ids(), outputs[:6]))


class TestRecalculate:
    """The single callback that refreshes every output."""

    def test_default_session_tiles(self):
        outputs = recalculate(1, "25,000", 0.5, 0.5, 25)

        assert _tiles(outputs) == {
            "tokens_received": "1,666,667",
            "launch_value": "$833,333",
            "future_value": "$833,333",
            "total_roi_percent": "3233%",
            "annual_staking_rewards": "$6,250",
            "monthly_staking_income": "$521",
        }

    def test_output_count_matches_registered_outputs(self):
        assert len(recalculate(1, "25,000", 0.5, 0.5, 25)) == 6 + 3

    def test_store_holds_raw_results(self):
        store = recalculate(1, "25,000", 0.5, 0.5, 25)[6]

        assert store["tokens_received"] == pytest.approx(25000 / 0.015)
        assert store["monthly_staking_income"] == pytest.approx(520.8333, abs=1e-4)

    def test_empty_amount_zeroes_everything(self):
        tiles = _tiles(recalculate(1, "", 0.5, 0.5, 25))

        assert tiles["tokens_received"] == "0"
        assert tiles["launch_value"] == "$0.00"
        assert tiles["total_roi_percent"] == "0%"
        assert tiles["monthly_staking_income"] == "$0.00"

    def test_cleared_price_box_renders_neutral(self):
        outputs = recalculate(1, "25,000", None, 0.5, 25)
        tiles = _tiles(outputs)

        assert tiles["launch_value"] == "$0.00"
        assert tiles["future_value"] == "$833,333"
        assert math.isnan(outputs[6]["launch_value"])

    def test_tie_amounts_round_up(self):
        tiles = _tiles(recalculate(1, "6,246", 0.5, 0.5, 100))
        assert tiles["monthly_staking_income"] == "$521"

    def test_loss_scenario(self):
        tiles = _tiles(recalculate(11, "10,000", 0.1, 0.1, 25))

        assert tiles["tokens_received"] == "33,333"
        assert tiles["launch_value"] == "$3,333"
        assert tiles["total_roi_percent"] == "-67%"

    def test_unknown_tier_prevents_update(self):
        with pytest.raises(PreventUpdate):
            recalculate(99, "25,000", 0.5, 0.5, 25)

    def test_rows_follow_selected_tier(self):
        rows = recalculate(7, "25,000", 0.5, 0.5, 25)[8]
        assert [row["stage"] for row in rows if row["selected"]] == [7]


class TestRenderResults:

    def test_keys_match_tiles(self, default_state):
        assert list(render_results(recompute(default_state))) == get_result_ids()


class TestInvestmentMask:

    def test_regroups(self):
        assert mask_investment_amount("25000") == "25,000"

    def test_already_masked(self):
        assert mask_investment_amount("25,000") is no_update

    def test_cleared(self):
        assert mask_investment_amount(None) is no_update
        assert mask_investment_amount("") is no_update


class TestAppWiring:

    def test_app_builds(self):
        from app import app

        assert app.layout is not None
        assert len(app.callback_map) == 2
