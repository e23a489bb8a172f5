import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from typing import Any, List, Optional, Sequence
import numpy as np
import plotly.graph_objects as go

from pyskiena.Benchmark import BenchmarkResult
from pyskiena.Graph import Graph


def circular_layout(n: int) -> np.ndarray:
    """
    Place ``n`` vertices evenly on the unit circle, vertex 0 at the top.

    Parameters
    ----------
    n : int
        Number of vertices.

    Returns
    -------
    np.ndarray
        Array of shape (n, 2) with the x, y position of each vertex.
    """
    theta = np.pi / 2 - 2 * np.pi * np.arange(n) / max(n, 1)
    return np.stack([np.cos(theta), np.sin(theta)], axis=1)


def _path_edges(path: Optional[Sequence[int]]) -> set:
    if not path:
        return set()
    return {(path[i], path[i + 1]) for i in range(len(path) - 1)}


def plot_graph(
    graph: Graph,
    path: Optional[Sequence[int]] = None,
    title: str = "Graph",
    fig: Optional[go.Figure] = None,
    ax: Optional[Axes] = None,
    marker_size: float = 12,
    marker_color: Any = "black",
    line_width: float = 1.0,
    line_color: Any = "grey",
    path_color: Any = "red",
    show_weights: bool = False,
):
    """
    Draw a graph on a circular layout using either Matplotlib or Plotly.

    Parameters
    ----------
    graph : Graph
        The graph to draw.
    path : Sequence[int], optional
        A vertex sequence, e.g. from ``TraversalResult.path_to``, whose edges
        are drawn in ``path_color``.
    title : str, optional
        Title of the plot. Default is "Graph".
    fig : plotly.graph_objects.Figure, optional
        A Plotly figure to add to. If None, a new figure is created.
    ax : matplotlib.axes.Axes, optional
        A Matplotlib axis to plot on. If provided, Matplotlib is used.
    marker_size : float, optional
        Size of the vertex markers. Default is 12.
    marker_color : Any, optional
        Color of the vertex markers. Default is "black".
    line_width : float, optional
        Width of edge lines. Default is 1.0.
    line_color : Any, optional
        Color of edges not on ``path``. Default is "grey".
    path_color : Any, optional
        Color of edges on ``path``. Default is "red".
    show_weights : bool, optional
        Annotate each edge with its weight. Default False.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis object used for plotting.
    """
    pos = circular_layout(graph.vertex_count())
    on_path = _path_edges(path)
    if not graph.directed:
        on_path |= {(v, u) for u, v in on_path}

    if ax is not None:
        ax.set_title(title)
        ax.set_aspect("equal")
        ax.axis("off")
        for u, v, w in graph.edges():
            highlighted = (u, v) in on_path
            if graph.directed:
                ax.annotate(
                    "",
                    xy=pos[v],
                    xytext=pos[u],
                    arrowprops=dict(
                        arrowstyle="->",
                        color=path_color if highlighted else line_color,
                        linewidth=line_width * (2 if highlighted else 1),
                    ),
                )
            else:
                ax.plot(
                    [pos[u][0], pos[v][0]],
                    [pos[u][1], pos[v][1]],
                    linestyle="-",
                    color=path_color if highlighted else line_color,
                    linewidth=line_width * (2 if highlighted else 1),
                )
            if show_weights:
                mid = (pos[u] + pos[v]) / 2
                ax.text(mid[0], mid[1], f"{w:g}", fontsize=8)
        ax.scatter(pos[:, 0], pos[:, 1], color=marker_color, s=marker_size**2, zorder=3)
        for v in graph.vertices():
            ax.text(pos[v][0] * 1.12, pos[v][1] * 1.12, str(v), ha="center", va="center")
        return ax

    return _plot_graph_plotly(
        graph, pos, on_path, title, fig,
        marker_size, marker_color, line_width, line_color, path_color, show_weights
    )


def _plot_graph_plotly(
    graph: Graph,
    pos: np.ndarray,
    on_path: set,
    title: str,
    fig: Optional[go.Figure],
    marker_size: float,
    marker_color: Any,
    line_width: float,
    line_color: Any,
    path_color: Any,
    show_weights: bool,
):
    """
    Internal helper to render a graph using Plotly.

    Returns
    -------
    plotly.graph_objects.Figure
        The updated or newly created Plotly figure.
    """
    if fig is None:
        fig = go.Figure()

    for u, v, w in graph.edges():
        highlighted = (u, v) in on_path
        fig.add_trace(go.Scatter(
            x=[pos[u][0], pos[v][0]], y=[pos[u][1], pos[v][1]],
            mode='lines',
            line=dict(
                color=path_color if highlighted else line_color,
                width=line_width * (2 if highlighted else 1),
            ),
            hoverinfo='text',
            text=f"{u} → {v}: {w:g}",
            showlegend=False
        ))
        if graph.directed:
            fig.add_annotation(
                x=pos[v][0], y=pos[v][1], ax=pos[u][0], ay=pos[u][1],
                xref='x', yref='y', axref='x', ayref='y',
                showarrow=True, arrowhead=2, text='',
                arrowcolor=path_color if highlighted else line_color,
            )
        if show_weights:
            mid = (pos[u] + pos[v]) / 2
            fig.add_annotation(x=mid[0], y=mid[1], text=f"{w:g}", showarrow=False)

    fig.add_trace(go.Scatter(
        x=pos[:, 0], y=pos[:, 1],
        mode='markers+text',
        marker=dict(size=marker_size, color=marker_color),
        text=[str(v) for v in graph.vertices()],
        textposition='top center',
        name='Vertices'
    ))

    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor='x'),
        margin=dict(l=0, r=0, b=0, t=30)
    )
    return fig


def plot_benchmark_timings(
    results: List[BenchmarkResult],
    ax: Optional[Axes] = None,
    title: str = "Benchmark timings",
):
    """
    Box plot of the per-trial timings of each benchmark result, in
    milliseconds.

    Parameters
    ----------
    results : List[BenchmarkResult]
        Results from ``run_benchmarks``.
    ax : matplotlib.axes.Axes, optional
        An optional Matplotlib axis to plot on. A new figure is created if None.
    title : str, optional
        Plot title.

    Returns
    -------
    matplotlib.axes.Axes
        The axis used for plotting.
    """
    if ax is None:
        fig, ax = plt.subplots()
    ax.boxplot([r.timings * 1e3 for r in results])
    ax.set_xticks(range(1, len(results) + 1))
    ax.set_xticklabels([f"{r.name}\nn={r.size}" for r in results], rotation=45, ha="right")
    ax.set_ylabel("time (ms)")
    ax.set_title(title)
    return ax
