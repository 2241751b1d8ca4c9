"""
Shared fixtures for the calculator tests.
"""

import pytest

from config.presale_tiers import get_tiers
from models import CalculatorState


@pytest.fixture
def tiers():
    return get_tiers()


@pytest.fixture
def default_state(tiers):
    """Session defaults: $25,000 into the Early Investor tier."""
    return CalculatorState(
        investment_amount=25000.0,
        launch_price=0.50,
        future_price=0.50,
        staking_apy=25.0,
        selected_tier=tiers[0],
    )


@pytest.fixture
def loss_state(tiers):
    """$10,000 into the top tier with a launch price below cost."""
    return CalculatorState(
        investment_amount=10000.0,
        launch_price=0.10,
        future_price=0.10,
        staking_apy=25.0,
        selected_tier=tiers[-1],
    )
