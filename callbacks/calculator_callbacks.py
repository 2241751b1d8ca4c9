# callbacks/calculator_callbacks.py
import logging
from typing import Any, Dict, Tuple

from dash import Input, Output, no_update
from dash.exceptions import PreventUpdate

from engine import recompute, compare_tiers, tier_comparison_rows
from layout.results_layout import get_result_ids
from models import DerivedResults
from utils.currency import (
    format_amount_for_display,
    format_currency_output,
    format_roi_percent,
    format_token_count,
)
from utils.input_adapter import get_calculator_state
from utils.plotting import create_tier_roi_figure

logger = logging.getLogger(__name__)


def render_results(results: DerivedResults) -> Dict[str, str]:
    """Display strings for the six result tiles, keyed by output id."""
    return {
        "tokens_received": format_token_count(results.tokens_received),
        "launch_value": format_currency_output(results.launch_value),
        "future_value": format_currency_output(results.future_value),
        "total_roi_percent": format_roi_percent(results.total_roi_percent),
        "annual_staking_rewards": format_currency_output(results.annual_staking_rewards),
        "monthly_staking_income": format_currency_output(results.monthly_staking_income),
    }


def recalculate(tier_stage, investment_amount, launch_price, future_price, staking_apy) -> Tuple[Any, ...]:
    """
    Builds the state from every current input value and recomputes all
    outputs from that one snapshot. Returns the six tile strings, the raw
    results, the comparison figure and the comparison rows, in output order.
    """
    try:
        state = get_calculator_state(
            tier_stage=tier_stage,
            investment_amount=investment_amount,
            launch_price=launch_price,
            future_price=future_price,
            staking_apy=staking_apy,
        )
    except ValueError as e:
        logger.warning("Ignoring calculator update: %s", e)
        raise PreventUpdate

    results = recompute(state)
    display = render_results(results)

    comparison = compare_tiers(state)
    stage = state.selected_tier.stage

    return (
        *(display[output_id] for output_id in get_result_ids()),
        results.to_dict(),
        create_tier_roi_figure(comparison, stage),
        tier_comparison_rows(comparison, stage),
    )


def mask_investment_amount(raw):
    """Re-groups the amount box; no_update when the text is already masked."""
    masked = format_amount_for_display(raw)
    if masked == (raw or ""):
        return no_update
    return masked


def register_calculator_callbacks(app):

    # ----------------------------------------------------------------------
    # 1. Input mask for the investment amount text box
    # ----------------------------------------------------------------------

    @app.callback(
        Output("investment_amount", "value"),
        Input("investment_amount", "value"),
        prevent_initial_call=True
    )
    def update_investment_mask(value):
        return mask_investment_amount(value)

    # ----------------------------------------------------------------------
    # 2. Recompute every output whenever any input changes
    # ----------------------------------------------------------------------

    @app.callback(
        *[Output(output_id, "children") for output_id in get_result_ids()],
        Output("results-store", "data"),
        Output("tier-roi-chart", "figure"),
        Output("tier-comparison-grid", "rowData"),

        Input("presale_tier", "value"),
        Input("investment_amount", "value"),
        Input("launch_price", "value"),
        Input("future_price", "value"),
        Input("staking_apy", "value"),
    )
    def update_results(tier_stage, investment_amount, launch_price, future_price, staking_apy):
        return recalculate(tier_stage, investment_amount, launch_price, future_price, staking_apy)
