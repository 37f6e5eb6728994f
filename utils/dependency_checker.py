"""
Dependency checker utility for Sliding Tiles.

This module checks if required dependencies are installed.
"""


def check_dependencies(frontend='pygame'):
    """Check if required dependencies are installed."""
    missing = []

    try:
        import numpy  # noqa: F401
    except ImportError:
        missing.append("numpy")

    try:
        import pygame  # noqa: F401
    except ImportError:
        missing.append("pygame")

    if frontend == 'curses':
        try:
            import curses  # noqa: F401
        except ImportError:
            missing.append("windows-curses")

    if missing:
        print(f"❌ Missing required dependencies: {', '.join(missing)}")
        print(f"Install with: pip install {' '.join(missing)}")
        return False

    return True
