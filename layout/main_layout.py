# main_layout.py
from dash import dcc
from dash import html

from config import calculator_defaults as defaults
from config.app_settings import APP_TITLE
from config.presale_tiers import get_tiers
from utils.currency import format_amount_for_display
from utils.ui_components import pretty_amount_input, pretty_number_input, tier_selector

from layout.results_layout import create_results_layout, create_comparison_layout

DISCLAIMER_TEXT = (
    "This calculator is for illustrative purposes only and does not constitute financial advice. "
    "All projections are estimates based on assumptions and actual results may vary significantly. "
    "Cryptocurrency investments carry substantial risk and you should conduct your own research and "
    "consult with qualified financial advisors before making any investment decisions. "
    "Past performance does not guarantee future results."
)

# ----------------------------------------------------------------------
# Application Layout Definition
# ----------------------------------------------------------------------

main_layout = html.Div(
    style={'fontFamily': 'Arial, sans-serif', 'margin': '2%', 'backgroundColor': '#f9f9fb'},
    children=[
        html.Div([
            html.H1(APP_TITLE, style={'textAlign': 'center', 'color': 'black', 'marginBottom': 0}),
            html.P("Calculate your potential returns from the EcoYield presale",
                   style={'textAlign': 'center', 'color': '#7f8c8d'}),
        ]),

        # raw engine output for anything that wants unformatted numbers
        dcc.Store(id='results-store'),

        # ----------------------------------------------------------------------
        # ROW 1: Inputs (left) and Results (right)
        # ----------------------------------------------------------------------
        html.Div([
            # COLUMN 1A: Inputs
            html.Div([
                tier_selector('presale_tier', get_tiers(), defaults.default_tier_stage),

                pretty_amount_input(
                    'investment_amount',
                    format_amount_for_display(defaults.default_investment_amount),
                    label="Investment Amount (USDC)",
                ),
                pretty_number_input(
                    'launch_price', defaults.default_launch_price,
                    label="Expected Launch Price",
                    min_val=defaults.price_min, step=defaults.price_step,
                    placeholder="0.50", prefix="$",
                ),
                pretty_number_input(
                    'future_price', defaults.default_future_price,
                    label="Expected 1-Year Price",
                    min_val=defaults.price_min, step=defaults.price_step,
                    placeholder="0.50", prefix="$",
                ),
                pretty_number_input(
                    'staking_apy', defaults.default_staking_apy,
                    label="Staking APY (%)",
                    min_val=defaults.apy_min, max_val=defaults.apy_max,
                    placeholder="25",
                ),

                # COLUMN 1A footer: Disclaimer
                html.Div([
                    html.H4("Important Disclaimer", style={'margin': '0 0 8px 0'}),
                    html.P(DISCLAIMER_TEXT, style={'fontSize': '12px', 'margin': 0}),
                ], style={
                    'padding': '15px',
                    'border': '1px solid #f39c12',
                    'borderRadius': '8px',
                    'backgroundColor': '#fef5e7',
                    'color': '#7e5109'
                }),
            ], style={
                'flex': 1,
                'minWidth': '340px',
                'padding': '25px',
                'border': '2px solid #ddd',
                'borderRadius': '12px',
                'backgroundColor': '#fff',
                'boxShadow': '0 8px 25px rgba(0,0,0,0.1)'
            }),

            # COLUMN 1B: Results
            create_results_layout(),

        ], style={
            'display': 'flex',
            'gap': '25px',
            'flexWrap': 'wrap',
            'maxWidth': '1200px',
            'margin': '30px auto'
        }),

        # ----------------------------------------------------------------------
        # ROW 2: Tier comparison
        # ----------------------------------------------------------------------
        create_comparison_layout(),
    ]
)
