# utils/ui_components.py
from dash import dcc, html

from utils.currency import format_tier_price

LABEL_STYLE = {
    'fontWeight': 'bold',
    'fontSize': 16,
    'marginBottom': '6px',
    'display': 'block'
}

INPUT_STYLE = {
    'width': '100%',
    'height': '36px',
    'fontSize': '16px',
    'fontFamily': 'monospace',
    'fontWeight': '500',
    'border': '1px solid #ccc',
    'borderRadius': '6px',
    'paddingLeft': '8px',
    'boxSizing': 'border-box'
}


def _label_for(id, label):
    # Same convention as the rest of the UI: derive "Launch Price" from "launch_price"
    if label is None:
        label = " ".join(word.capitalize() for word in id.replace('-', '_').split('_'))
    return html.Label(label, htmlFor=id, style=LABEL_STYLE)


def pretty_amount_input(id, value, label=None, placeholder="25,000"):
    """
    Text input for a comma-grouped dollar amount. The box is type='text' so
    the grouping commas survive; a callback re-masks it on every keystroke.
    """
    return html.Div([
        _label_for(id, label),
        html.Div([
            html.Span("$", style={'marginRight': '6px', 'fontWeight': 'bold'}),
            dcc.Input(
                id=id,
                type='text',
                value=value,
                placeholder=placeholder,
                inputMode='decimal',
                style=INPUT_STYLE,
            ),
        ], style={'display': 'flex', 'alignItems': 'center'}),
    ], style={'marginBottom': '18px'})


def pretty_number_input(id, value, label=None, min_val=None, max_val=None, step=None, placeholder=None, prefix=None):
    """
    Numeric input using the native min/max/step props. Unlike the amount box
    this one is type='number', so the browser hands back None for junk.
    """
    input_props = {}
    if min_val is not None:
        input_props['min'] = min_val
    if max_val is not None:
        input_props['max'] = max_val
    if step is not None:
        input_props['step'] = step

    row = []
    if prefix:
        row.append(html.Span(prefix, style={'marginRight': '6px', 'fontWeight': 'bold'}))
    row.append(
        dcc.Input(
            id=id,
            type='number',
            value=value,
            placeholder=placeholder,
            style=INPUT_STYLE,
            **input_props
        )
    )

    return html.Div([
        _label_for(id, label),
        html.Div(row, style={'display': 'flex', 'alignItems': 'center'}),
    ], style={'marginBottom': '18px'})


def tier_selector(id, tiers, value):
    """Radio list of presale tiers; the selected value is the tier's stage."""
    options = [
        {
            'label': html.Span([
                html.Span(tier.name, style={'fontWeight': 'bold'}),
                html.Span(f" {format_tier_price(tier.price)}", style={'color': '#16a085', 'marginLeft': '6px'}),
            ]),
            'value': tier.stage,
        }
        for tier in tiers
    ]
    return html.Div([
        _label_for(id, "Select Presale Tier"),
        dcc.RadioItems(
            id=id,
            options=options,
            value=value,
            inline=True,
            labelStyle={
                'display': 'inline-block',
                'padding': '8px 12px',
                'margin': '4px',
                'border': '1px solid #ddd',
                'borderRadius': '8px',
                'cursor': 'pointer'
            },
        ),
    ], style={'marginBottom': '18px'})


def result_card(id, title, subtitle, highlight=False):
    """One output tile; the callback fills the value Div by id."""
    style = {
        'padding': '18px',
        'borderRadius': '10px',
        'backgroundColor': '#27ae60' if highlight else 'rgba(255,255,255,0.08)',
        'color': 'white',
        'textAlign': 'center',
        'boxShadow': '0 4px 8px rgba(0,0,0,0.1)'
    }
    return html.Div([
        html.H3(title, style={'fontSize': '15px', 'margin': '0 0 8px 0', 'fontWeight': 'normal'}),
        html.Div(id=id, style={'fontSize': '26px', 'fontWeight': 'bold'}),
        html.Div(subtitle, style={'fontSize': '12px', 'opacity': 0.8, 'marginTop': '6px'}),
    ], style=style)
