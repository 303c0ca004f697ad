#!/usr/bin/env python3
"""Basic usage examples for dotgraph."""

from dotgraph import Graph, GraphRenderer, GraphvizNotFoundError, LayoutEngine, to_dot


def main():
    """Demonstrate basic dotgraph usage."""

    # Create a directed graph
    graph = Graph("Test Graph", directed=True)

    # Set some attributes of the graph
    graph.set_graph_attr({"fontsize": "32", "label": "Test Graph"})

    # Add edges (missing nodes are created automatically)
    graph.add_edge("a", "b", "a-to-b", {"label": "A to B"})
    graph.add_edge("c", "b", "c-to-b", {"style": "dotted"})
    graph.add_edge("b", "a", "b-to-a")
    graph.add_node("c", [("color", "blue"), ("shape", "box"),
                         ("style", "filled"), ("fontcolor", "white")])
    graph.add_node("d", {"lable": "node"})

    print(f"Nodes: {graph.nodes()}")
    print(f"Edges at 'a': {graph.edges_at('a')}")
    print(f"Degree of 'b': {graph.degree('b')}")

    # Example 1: Print the DOT source
    print("Example DOT graph:")
    print(to_dot(graph))

    # Example 2: Export as PNG
    # Pass graphviz_path=r"C:\Program Files\Graphviz\bin" if `dot` is not on PATH
    try:
        renderer = GraphRenderer()
    except GraphvizNotFoundError as e:
        print(e)
        return

    print("Exporting graph as PNG...")
    renderer.render_graph(graph, "test_graph.png")

    # Example 3: Circular layout as SVG
    renderer.render_graph(graph, "test_graph.svg", output_format="svg", engine=LayoutEngine.CIRCO)

    print("All examples completed!")


if __name__ == "__main__":
    main()
