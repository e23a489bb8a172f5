import matplotlib.pyplot as plt
from pyskiena import Graph, shortest_paths, breadth_first, depth_first, plot_graph

graph = Graph(
    6,
    [(0, 1, 7), (0, 2, 9), (0, 5, 14), (1, 2, 10), (1, 3, 15),
     (2, 3, 11), (2, 5, 2), (3, 4, 6), (4, 5, 9)],
    directed=False,
)

result = shortest_paths(graph, 0)
print("distances:", result.distance_map())
print("path to 4:", result.path_to(4))
print("bfs order:", list(breadth_first(graph, 0)))
print("dfs order:", list(depth_first(graph, 0)))

fig, ax = plt.subplots()
plot_graph(graph, path=result.path_to(4), ax=ax, show_weights=True,
           title="Shortest path 0 → 4")

plt.show()
