# =============================================================================
# Presale schedule: fixed pricing tiers, cheapest first
# =============================================================================
from typing import Tuple

from models import Tier

PRESALE_TIERS: Tuple[Tier, ...] = (
    Tier(name="Early Investor", price=0.015, stage=1),
    Tier(name="Tier 1", price=0.025, stage=2),
    Tier(name="Tier 2", price=0.035, stage=3),
    Tier(name="Tier 3", price=0.050, stage=4),
    Tier(name="Tier 4", price=0.075, stage=5),
    Tier(name="Tier 5", price=0.100, stage=6),
    Tier(name="Tier 6", price=0.125, stage=7),
    Tier(name="Tier 7", price=0.150, stage=8),
    Tier(name="Tier 8", price=0.200, stage=9),
    Tier(name="Tier 9", price=0.250, stage=10),
    Tier(name="Tier 10", price=0.300, stage=11),
)

DEFAULT_TIER = PRESALE_TIERS[0]

_TIERS_BY_STAGE = {tier.stage: tier for tier in PRESALE_TIERS}


def get_tiers() -> Tuple[Tier, ...]:
    """Returns the full presale schedule, ordered by stage."""
    return PRESALE_TIERS


def get_tier_by_stage(stage) -> Tier:
    """
    Looks up a tier by its stage number. Dash hands radio values back as
    whatever type they were declared with, so numeric strings are accepted.
    Non-integral values (4.7, True) are rejected rather than truncated.
    """
    if isinstance(stage, bool) or (isinstance(stage, float) and not stage.is_integer()):
        raise ValueError(f"Unknown presale stage: {stage!r}")
    try:
        return _TIERS_BY_STAGE[int(stage)]
    except (KeyError, TypeError, ValueError):
        raise ValueError(f"Unknown presale stage: {stage!r}") from None
