import plotly.graph_objects as go

from config import SALES_COLORS


def plot_sales_stacked_bar(series, title="Plug-in EV Sales by Brand"):
    """Stacked BEV / PHEV bars, brands in ranked order."""
    fig = go.Figure()
    for label, s in (("BEV", series.bev), ("PHEV", series.phev)):
        fig.add_trace(go.Bar(
            x=list(s.index),
            y=s.values,
            name=label,
            marker=dict(color=SALES_COLORS[label]),
            hovertemplate="%{x}<br>" + label + ": %{y:,}<extra></extra>",
        ))

    fig.update_layout(
        barmode='stack',
        title=title,
        xaxis_title='Brand',
        yaxis_title='Units sold',
        height=500,
        template='plotly_white',
    )
    return fig


def plot_sales_summary_table(summary):
    """Ranked summary as a Plotly table (used by the HTML export)."""
    fig = go.Figure(go.Table(
        header=dict(
            values=['Rank', 'Brand', 'BEV', 'PHEV', 'Total', 'Share (%)'],
            fill_color='#0a9396',
            font=dict(color='white'),
            align='left',
        ),
        cells=dict(
            values=[
                summary['rank'].tolist(),
                summary['brand'].tolist(),
                [f"{v:,}" for v in summary['bev_units']],
                [f"{v:,}" for v in summary['phev_units']],
                [f"{v:,}" for v in summary['total_units']],
                [f"{v:.2f}" for v in summary['market_share_percent']],
            ],
            align='left',
        ),
    ))
    fig.update_layout(title='Market Share Summary', template='plotly_white')
    return fig
