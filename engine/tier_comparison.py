# engine/tier_comparison.py
from dataclasses import replace
from typing import Any, Dict, List, Tuple

from config.presale_tiers import get_tiers
from models import CalculatorState, DerivedResults, Tier
from .return_calculator import recompute


def compare_tiers(state: CalculatorState) -> List[Tuple[Tier, DerivedResults]]:
    """Runs the engine once per presale tier, keeping every other input fixed."""
    return [(tier, recompute(replace(state, selected_tier=tier))) for tier in get_tiers()]


def tier_comparison_rows(comparison: List[Tuple[Tier, DerivedResults]], selected_stage: int) -> List[Dict[str, Any]]:
    """Flattens a comparison into rowData for the ag-grid table."""
    rows = []
    for tier, results in comparison:
        rows.append({
            "stage": tier.stage,
            "name": tier.name,
            "price": tier.price,
            "tokens_received": results.tokens_received,
            "future_value": results.future_value,
            "total_roi_percent": results.total_roi_percent,
            "selected": tier.stage == selected_stage,
        })
    return rows
