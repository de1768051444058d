#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FlavorSheet CLI Launcher
Runs the CLI from a source checkout without installing
"""

import sys
from pathlib import Path

# Script text is Japanese; keep the console from choking on it
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

def setup_environment() -> None:
    """Add project root to Python path."""
    project_root = Path(__file__).parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

def main() -> int:
    setup_environment()
    from flavorsheet.cli_main import main as cli_main
    return cli_main()

if __name__ == "__main__":
    sys.exit(main())
