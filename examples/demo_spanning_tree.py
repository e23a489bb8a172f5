from pyskiena import Graph, minimum_spanning_tree, connected_components, has_cycle, plot_graph
from pyskiena.generators import random_graph

graph = random_graph(12, 30, directed=False, seed=4)
mst = minimum_spanning_tree(graph)

print("has cycle:", has_cycle(graph))
print("components:", connected_components(graph))
print(f"spanning forest: {len(mst.edges)} edges, weight {mst.total_weight:.2f}")

fig = plot_graph(Graph(graph.vertex_count(), mst.edges, directed=False),
                 title="Minimum spanning tree", line_color="blue")
fig.show()
