# config/calculator_defaults.py
# Starting values for a fresh calculator session, plus the limits the
# number inputs enforce in the browser.

default_investment_amount = 25_000
default_launch_price = 0.50
default_future_price = 0.50
default_staking_apy = 25
default_tier_stage = 1

# Price inputs (launch and 1-year)
price_min = 0.001
price_step = 0.01

# Staking APY input, in percent
apy_min = 0
apy_max = 500

DEFAULT_STATE = {
    "investment_amount": default_investment_amount,
    "launch_price": default_launch_price,
    "future_price": default_future_price,
    "staking_apy": default_staking_apy,
    "tier_stage": default_tier_stage,
}
