# engine/return_calculator.py
from models import CalculatorState, DerivedResults

MONTHS_PER_YEAR = 12


def recompute(state: CalculatorState) -> DerivedResults:
    """
    Derives every output field from a single snapshot of the calculator state.

    Pure: no rounding, no exceptions, nothing cached. A nan in any input flows
    through to the outputs that depend on it; the formatters deal with it.
    """
    amount = state.investment_amount

    # Tier prices are always > 0, so this never divides by zero
    tokens = amount / state.selected_tier.price
    launch_value = tokens * state.launch_price
    future_value = tokens * state.future_price

    # nan future value fails the comparison and lands on 0 as well
    if future_value > 0 and amount > 0:
        roi = ((future_value - amount) / amount) * 100
    else:
        roi = 0.0

    annual_rewards = (amount * state.staking_apy) / 100
    monthly_income = annual_rewards / MONTHS_PER_YEAR

    return DerivedResults(
        tokens_received=tokens,
        launch_value=launch_value,
        future_value=future_value,
        total_roi_percent=roi,
        annual_staking_rewards=annual_rewards,
        monthly_staking_income=monthly_income,
    )
