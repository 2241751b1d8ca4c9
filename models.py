# models.py
from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class Tier:
    name: str
    price: float   # USD per token, always > 0
    stage: int     # 1-based rank in the presale schedule


@dataclass
class CalculatorState:
    investment_amount: float
    launch_price: float
    future_price: float
    staking_apy: float      # percent, 25 means 25%
    selected_tier: Tier


@dataclass(frozen=True)
class DerivedResults:
    tokens_received: float
    launch_value: float
    future_value: float
    total_roi_percent: float
    annual_staking_rewards: float
    monthly_staking_income: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
