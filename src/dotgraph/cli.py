"""Command-line interface for dotgraph."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import GraphExporter, GraphvizNotFoundError, LayoutEngine, OutputFormat, RenderConfig, load_graph
from .visualization import DOTGenerator, GraphRenderer

# Setup rich console
console = Console()
error_console = Console(stderr=True)


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, rich_tracebacks=True)],
    )


def _fail(error: Exception, verbose: bool) -> None:
    error_console.print(f"❌ Error: {error}", style="red", markup=False)
    if verbose:
        error_console.print_exception()
    sys.exit(1)


graphviz_path_option = click.option(
    "--graphviz-path",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory containing the Graphviz executables, if they are not on PATH.",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(package_name="python-dotgraph")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """dotgraph - build graphs and render them with Graphviz.

    Graphs are described as JSON documents with a name, a directed flag,
    graph attributes, nodes and edges.

    \b
    Examples:
      dotgraph dot graph.json                 # Print the DOT source
      dotgraph export graph.json -o out.png   # Render to PNG
      dotgraph export graph.json -f svg -e neato
      dotgraph validate --graphviz-path /opt/graphviz/bin
    """
    setup_logging(verbose)

    # Store global options in context for commands to use
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command("dot")
@click.argument("graph_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write DOT to this file instead of stdout")
@click.option("--escape", is_flag=True, help="Escape quotes, backslashes and newlines in attribute values")
@click.pass_context
def print_dot(ctx: click.Context, graph_file: Path, output: Path | None, escape: bool) -> None:
    """Print the DOT source for a graph description.

    \b
    Examples:
      dotgraph dot graph.json
      dotgraph dot graph.json -o graph.dot
    """
    verbose_mode = ctx.obj.get("verbose", False)
    try:
        graph = load_graph(graph_file)
        dot_content = DOTGenerator(escape=escape).generate_dot(graph)

        if output is None:
            click.echo(dot_content, nl=False)
        else:
            output.write_text(dot_content, encoding="utf-8")
            if verbose_mode:
                console.print(f"DOT written to {output}", style="green")

    except Exception as e:
        _fail(e, verbose_mode)


@cli.command()
@click.argument("graph_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    help="Output file path (default: the graph name with the format as extension)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    default=OutputFormat.PNG.value,
    help="Output format, optionally as format:renderer:formatter (default: png)",
)
@click.option(
    "--engine",
    "-e",
    default=LayoutEngine.DOT.value,
    help="Graphviz layout engine: dot, neato, fdp, sfdp, twopi, circo, ... (default: dot)",
)
@click.option("--escape", is_flag=True, help="Escape quotes, backslashes and newlines in attribute values")
@click.option("--save-dot", is_flag=True, help="Save DOT source file alongside output")
@graphviz_path_option
@click.pass_context
def export(
    ctx: click.Context,
    graph_file: Path,
    output: str | None,
    output_format: str,
    engine: str,
    escape: bool,
    save_dot: bool,
    graphviz_path: Path | None,
) -> None:
    """Render a graph description to an image with Graphviz.

    \b
    Examples:
      dotgraph export graph.json
      dotgraph export graph.json -o graph.svg -f svg
      dotgraph export graph.json -f png:cairo -e circo --save-dot
    """
    verbose_mode = ctx.obj.get("verbose", False)
    try:
        graph = load_graph(graph_file)

        config = RenderConfig(
            output_file=output,
            output_format=output_format,
            engine=engine,
            graphviz_path=graphviz_path,
            save_dot=save_dot,
            verbose=verbose_mode,
        )

        if verbose_mode:
            console.print(
                f"🎨 Rendering {graph.number_of_nodes()} nodes and {graph.number_of_edges()} edges...",
                style="green",
            )

        output_path = GraphExporter(config).export(graph, escape=escape)
        console.print(f"{output_path}", style="green")

    except Exception as e:
        _fail(e, verbose_mode)


@cli.command("validate")
@graphviz_path_option
@click.option("--engine", "-e", default=LayoutEngine.DOT.value, help="Layout engine to check for")
@click.pass_context
def validate_prerequisites(ctx: click.Context, graphviz_path: Path | None, engine: str) -> None:
    """Validate prerequisites for rendering."""
    verbose_mode = ctx.obj.get("verbose", False)

    config = RenderConfig(graphviz_path=graphviz_path, engine=engine, verbose=verbose_mode)
    prereqs = GraphExporter(config).validate_prerequisites()

    table = Table(title="Prerequisites Validation")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="magenta")
    table.add_column("Description", style="green")

    descriptions = {
        "graphviz": "Graphviz 'dot' executable",
        "engine": f"Layout engine '{engine}'",
        "graphviz_path": f"Graphviz directory {graphviz_path}",
    }

    for component, status in prereqs.items():
        status_str = "✅ OK" if status else "❌ FAILED"
        table.add_row(
            component.replace("_", " ").title(),
            status_str,
            descriptions.get(component, ""),
        )

    console.print(table)

    if all(prereqs.values()):
        console.print("\n✅ All prerequisites validated successfully!", style="green bold")
    else:
        console.print(
            "\n❌ Prerequisites failed. Please address the issues above.",
            style="red",
        )
        if not prereqs.get("graphviz"):
            console.print(
                "💡 Install Graphviz: https://graphviz.org/download/ or pass --graphviz-path",
                style="yellow",
            )
        sys.exit(1)


@cli.command("info")
@graphviz_path_option
def show_info(graphviz_path: Path | None) -> None:
    """Show information about layout engines and output formats."""
    try:
        renderer = GraphRenderer(graphviz_path=graphviz_path)
        installed = set(renderer.get_available_engines())
        version = renderer.graphviz_version()
    except GraphvizNotFoundError:
        installed = set()
        version = None

    console.print(f"Graphviz version: {version or 'not found'}")

    engine_descriptions = {
        "dot": "Hierarchical layout for directed graphs (default)",
        "neato": "Spring model layout",
        "fdp": "Force-directed placement",
        "sfdp": "Multiscale force-directed placement for large graphs",
        "twopi": "Radial layout",
        "circo": "Circular layout",
        "osage": "Clustered array layout",
        "patchwork": "Squarified treemap layout",
    }

    engines_table = Table(title="Layout Engines")
    engines_table.add_column("Engine", style="cyan")
    engines_table.add_column("Installed", style="magenta")
    engines_table.add_column("Description", style="green")

    for engine in LayoutEngine:
        engines_table.add_row(
            engine.value,
            "✅" if engine.value in installed else "❌",
            engine_descriptions.get(engine.value, ""),
        )

    console.print(engines_table)

    format_descriptions = {
        "png": "Portable Network Graphics (raster)",
        "svg": "Scalable Vector Graphics (vector)",
        "pdf": "Portable Document Format",
        "jpg": "JPEG (raster)",
        "gif": "Graphics Interchange Format (raster)",
        "ps": "PostScript",
        "dot": "DOT with layout information",
        "json": "JSON with layout information",
        "plain": "Simple text layout format",
    }

    formats_table = Table(title="Common Output Formats")
    formats_table.add_column("Format", style="cyan")
    formats_table.add_column("Description", style="green")

    for fmt in OutputFormat:
        formats_table.add_row(fmt.value, format_descriptions.get(fmt.value, ""))

    console.print(formats_table)
    console.print("Formats accept renderer and formatter selectors, e.g. png:cairo:gd")


def main() -> None:
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
