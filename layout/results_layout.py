# results_layout.py
from dash import html, dcc
import dash_ag_grid as dag

from utils.ui_components import result_card
from config.app_settings import TOKEN_NAME

# (output id, title, subtitle, highlight)
RESULT_CARDS = [
    ("tokens_received", "Tokens Received", f"{TOKEN_NAME} tokens", False),
    ("launch_value", "Value at Launch", "Expected Q1 2026", False),
    ("future_value", "Value at 1 Year", "12 months post-launch", False),
    ("total_roi_percent", "Total ROI (1 Year)", "Return on investment", True),
    ("annual_staking_rewards", "Annual Staking Rewards", "Based on current APY", False),
    ("monthly_staking_income", "Monthly Staking Income", "From staking rewards", False),
]


def get_result_ids():
    return [card_id for card_id, *_ in RESULT_CARDS]


def create_results_layout():
    """
    Right-hand panel: the six result tiles.
    """
    return html.Div([
        html.H2("Investment Analysis", style={'marginBottom': '25px', 'fontSize': '20px', 'color': 'white'}),
        html.Div(
            [result_card(card_id, title, subtitle, highlight) for card_id, title, subtitle, highlight in RESULT_CARDS],
            style={'display': 'grid', 'gridTemplateColumns': 'repeat(2, 1fr)', 'gap': '15px'}
        ),
    ], style={
        'flex': 1,
        'minWidth': '340px',
        'padding': '25px',
        'borderRadius': '12px',
        'backgroundColor': '#2c3e50',
        'boxShadow': '0 8px 25px rgba(0,0,0,0.1)'
    })


def create_comparison_layout():
    """
    Full-width section below the calculator: ROI per tier chart and table.
    """
    return html.Div([
        html.Div([dcc.Graph(id='tier-roi-chart')], style={'margin': '30px 0'}),

        dag.AgGrid(
            id='tier-comparison-grid',
            columnDefs=[
                {"field": "stage", "headerName": "Stage", "width": 90},
                {"field": "name", "headerName": "Tier", "width": 150},
                {"field": "price", "headerName": "Price ($)",
                 "valueFormatter": {"function": "params.value == null ? '' : '$' + Number(params.value).toFixed(3)"}},
                {"field": "tokens_received", "headerName": "Tokens", "type": "rightAligned",
                 "valueFormatter": {"function": "params.value == null ? '0' : Math.round(params.value).toLocaleString()"}},
                {"field": "future_value", "headerName": "Value at 1 Year", "type": "rightAligned",
                 "valueFormatter": {"function": "params.value == null ? '$0' : '$' + Math.round(params.value).toLocaleString()"}},
                {"field": "total_roi_percent", "headerName": "ROI", "type": "rightAligned",
                 "valueFormatter": {"function": "params.value == null ? '0%' : Math.round(params.value) + '%'"}},
            ],
            rowData=[],
            columnSize="sizeToFit",
            getRowStyle={
                "styleConditions": [
                    {"condition": "params.data.selected", "style": {"backgroundColor": "#d5f5e3", "fontWeight": "bold"}},
                ]
            },
            dashGridOptions={"domLayout": "autoHeight"},
            style={'width': '100%'},
        ),
    ], style={'maxWidth': '1200px', 'margin': '0 auto'})
