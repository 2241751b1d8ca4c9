import logging
import math
from dataclasses import fields
from typing import Any

from config.calculator_defaults import DEFAULT_STATE
from config.presale_tiers import get_tier_by_stage
from models import CalculatorState
from utils.currency import parse_amount

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = ("launch_price", "future_price", "staking_apy")


def coerce_number(raw) -> float:
    """
    Converts a value from a number input into a float. Dash sends None when
    the browser cannot read the field as a number; that becomes nan so the
    engine outputs show the input is incomplete.
    """
    if raw is None:
        return math.nan
    if isinstance(raw, str) and not raw.strip():
        return math.nan
    try:
        return float(raw)
    except (TypeError, ValueError):
        return math.nan


def get_calculator_state(**kwargs: Any) -> CalculatorState:
    """
    Builds a CalculatorState by merging the UI values over the session
    defaults, normalizing each field and dropping anything that is not a
    state field.

    Raises ValueError if 'tier_stage' does not name a catalog tier.
    """
    # 1. Defaults first, UI values override
    inputs_dict = DEFAULT_STATE.copy()
    inputs_dict.update(kwargs)

    # 2. The tier arrives as a stage number from the radio selector
    inputs_dict["selected_tier"] = get_tier_by_stage(inputs_dict.pop("tier_stage"))

    # 3. Amount text box: grouped string, bad input reads as zero
    inputs_dict["investment_amount"] = parse_amount(inputs_dict.get("investment_amount"))

    # 4. Number inputs: bad input reads as nan
    for name in NUMERIC_FIELDS:
        value = coerce_number(inputs_dict.get(name))
        if math.isnan(value):
            logger.warning(
                "Input %s=%r is not a number; dependent results are undefined",
                name, inputs_dict.get(name)
            )
        inputs_dict[name] = value

    # 5. Keep only the fields CalculatorState declares
    state_field_names = {f.name for f in fields(CalculatorState)}
    final_inputs = {
        key: value
        for key, value in inputs_dict.items()
        if key in state_field_names
    }

    return CalculatorState(**final_inputs)


def default_calculator_state() -> CalculatorState:
    return get_calculator_state()
