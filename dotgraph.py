#!/usr/bin/env python3
"""
Wrapper script to run dotgraph directly from the project directory.

This script allows you to run dotgraph without installing it:
    python dotgraph.py dot examples/test_graph.json
    python dotgraph.py export examples/test_graph.json -o test_graph.png
    python dotgraph.py --help

From the project root this module shadows the installed package for
`python -m pytest`; pytest puts src/ first on sys.path (see pyproject.toml),
or run plain `pytest`.
"""

import sys
from pathlib import Path

# Add src directory to Python path so we can import dotgraph
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

# Import and run the CLI
try:
    from dotgraph.cli import main
except ImportError as e:
    print(f"❌ Error importing dotgraph: {e}")
    print(
        "\n💡 Make sure you're running from the project directory and have installed dependencies:",
    )
    print("   pip install -e .")
    sys.exit(1)

if __name__ == "__main__":
    main()
