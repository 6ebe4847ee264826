import plotly.graph_objects as go


def plot_pollution_table(frame, title="Battery Production Pollution Factors"):
    """Render the pollution display frame as a Plotly table, rows as given."""
    fig = go.Figure(go.Table(
        header=dict(
            values=list(frame.columns),
            fill_color='#002A47',
            font=dict(color='white'),
            align='left',
        ),
        cells=dict(
            values=[frame[c].tolist() for c in frame.columns],
            align='left',
        ),
    ))
    fig.update_layout(title=title, template='plotly_white')
    return fig
