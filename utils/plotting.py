# utils/plotting.py

import numpy as np
import plotly.graph_objects as go

SELECTED_COLOR = '#27ae60'
OTHER_COLOR = '#95a5a6'


def _empty_figure(title, message):
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        xref="paper", yref="paper", x=0.5, y=0.5,
        showarrow=False, font_size=20
    )
    fig.update_layout(title=title, height=400, template="plotly_white")
    return fig


def create_tier_roi_figure(comparison, selected_stage, title="1-Year ROI by Presale Tier"):
    """
    Bar chart of ROI % for every tier at the current inputs, with the
    selected tier picked out in green.
    """
    if not comparison:
        return _empty_figure(title, "No data available")

    names = [tier.name for tier, _ in comparison]
    roi = np.array([results.total_roi_percent for _, results in comparison], dtype=float)

    # Zero investment or unreadable prices: every ROI is 0 or nan, nothing to show
    if not np.any(np.isfinite(roi) & (roi != 0)):
        return _empty_figure(title, "No data available")

    roi = np.where(np.isfinite(roi), roi, 0.0)
    colors = [SELECTED_COLOR if tier.stage == selected_stage else OTHER_COLOR for tier, _ in comparison]
    prices = [tier.price for tier, _ in comparison]

    fig = go.Figure(go.Bar(
        x=names,
        y=roi,
        marker_color=colors,
        customdata=prices,
        hovertemplate='<b>%{x}</b><br>Tier price: $%{customdata:.3f}<br>ROI: %{y:,.0f}%<extra></extra>'
    ))
    fig.add_hline(y=0, line_width=1, line_color='#34495e')
    fig.update_layout(
        title=title,
        xaxis_title="Presale tier",
        yaxis_title="ROI (%)",
        height=400,
        template="plotly_white",
        showlegend=False,
        margin=dict(l=60, r=20, t=60, b=60)
    )
    return fig
