import inspect
from functools import cache
from typing import Optional

import dash_bootstrap_components as dbc
import numpy as np
import pandas as pd
import plotly.express as px
from dash import Dash, Input, Output, State, callback, dash_table, dcc, html

from .Config import *
from .operation_count import operation_cnts
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .summary import COLUMNS, summarize, summary_row


@cache
def get_operation_cnts(sorting_algorithm_i: int, N: int) -> np.ndarray:
    sorting_algorithm = sorting_algorithms[sorting_algorithm_i]
    print(f"init: `{sorting_algorithm.name}` with {N} elements")
    data = operation_cnts(sorting_algorithm, N)
    print(f"fin:  `{sorting_algorithm.name}` with {N} elements")
    return data


def to_records(df: pd.DataFrame) -> list[dict]:
    # NaN is not valid JSON
    return df.astype(object).where(df.notna(), None).to_dict("records")


def is_valid_N(input_N: Optional[str]) -> bool:
    return input_N is not None and int(input_N) >= 1


@callback(
    Output("statistics_graph", "figure"),
    Output("statistics_table", "data"),
    Output("comparison_table", "data"),
    Output("notifications_container", "children"),
    Input("sorting_algorithm", "value"),
    Input("input_N", "value"),
)
def on_data(sorting_algorithm_i: str, input_N: Optional[str]):
    if not is_valid_N(input_N):
        return [{}, [], [], []]
    sorting_algorithm_i, N = int(sorting_algorithm_i), int(input_N)
    sorting_algorithm = sorting_algorithms[sorting_algorithm_i]
    notification = []
    if sorting_algorithm.max_N < N:
        notification = dbc.Alert(
            f"Input `N={N}` is too large (upper limit for `{sorting_algorithm.name}` is {sorting_algorithm.max_N}), "
            f"using the results from random sampling for at most {MAX_SAMPLE_TIME_MS / 1000:.1f}s instead.",
            color="warning",
            dismissable=True,
            duration=10000,
        )
    data = get_operation_cnts(sorting_algorithm_i, N)
    fig = px.histogram(x=data, title="Operation Count Distribution", labels={"x": "Operation Count"}, color=data, text_auto=True)
    fig.layout.update(showlegend=False)
    row = to_records(pd.DataFrame([summary_row(sorting_algorithm, N, data)], columns=COLUMNS))
    return [fig, row, to_records(summarize(N, get_operation_cnts)), notification]


@callback(Output("input_N", "invalid"), Input("input_N", "value"))
def on_input_N_invalid(input_N: Optional[str]):
    return not is_valid_N(input_N)


@callback(
    Output("code_modal", "is_open"),
    Output("code_modal", "children"),
    Input("show_code", "n_clicks"),
    State("sorting_algorithm", "value"),
    prevent_initial_call=True,
)
def on_show_code(_show_code: int, sorting_algorithm_i: str):
    sorting_algorithm = sorting_algorithms[int(sorting_algorithm_i)]
    # the registered func is a thin wrapper, show its whole module instead
    code = inspect.getsource(inspect.getmodule(sorting_algorithm.func)).strip()
    children = [
        dbc.ModalHeader(dbc.ModalTitle(sorting_algorithm.name)),
        dbc.ModalBody(dcc.Markdown(f"```python\n{code}\n```"), style={"margin": "auto"}),
    ]
    return [True, children]


control_panel = html.Div(
    [
        dbc.Row(
            [
                "Sorting Algorithm:",
                dbc.Select(
                    options=[{"label": sorting_algorithm.name, "value": i} for i, sorting_algorithm in enumerate(sorting_algorithms)],
                    id="sorting_algorithm",
                    style={"width": "16rem"},
                    value=str(SORTING_ALGORITHM_I),
                    persistence=True,
                    persistence_type=USER_STATE_STORAGE_TYPE,
                ),
            ],
            style={"column-gap": "0", "display": "flex", "align-items": "center", "padding": "0.5rem"},
        ),
        dbc.Button("Show Code", id="show_code"),
        dbc.Row(
            [
                "N(>0):",
                dbc.Input(
                    id="input_N",
                    type="number",
                    min=1,
                    step=1,
                    style={"width": "5rem"},
                    debounce=True,
                    value=INPUT_N,
                    persistence=True,
                    persistence_type=USER_STATE_STORAGE_TYPE,
                ),
            ],
            style={"column-gap": "0", "display": "flex", "align-items": "center", "padding": "0.5rem"},
        ),
    ],
    style={"column-gap": "1rem", "display": "flex", "align-items": "center", "margin": "1rem", "flex-wrap": "wrap"},
)
statistics_panel = dcc.Loading(
    html.Div(
        [
            dcc.Graph(id="statistics_graph"),
            dash_table.DataTable(
                id="statistics_table",
                style_cell={"textAlign": "center"},
                columns=[{"name": x, "id": x} for x in COLUMNS],
            ),
            html.H5("All algorithms", style={"margin-top": "1rem"}),
            dash_table.DataTable(
                id="comparison_table",
                style_cell={"textAlign": "center"},
                columns=[{"name": x, "id": x} for x in COLUMNS],
            ),
        ]
    ),
    type="default",
)
code_modal = dbc.Modal(id="code_modal", size="lg", is_open=False, scrollable=True)

app = Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Partition Sort",
    update_title=None,
)
app.layout = html.Div(
    [html.Div(id="notifications_container"), control_panel, statistics_panel, code_modal],
    style={"width": "98vw", "margin": "auto"},
)
server = app.server

if __name__ == "__main__":
    app.run(debug=True)
