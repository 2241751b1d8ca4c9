# engine/__init__.py

# The single-snapshot engine used by the calculator callback
from .return_calculator import recompute

# Per-tier sweep for the comparison chart and table
from .tier_comparison import compare_tiers, tier_comparison_rows
