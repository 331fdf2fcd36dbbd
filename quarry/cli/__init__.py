"""
Quarry CLI.

Usage:
    quarry scan io.github.mighten.scan -p build/classes -p lib/app.jar
    quarry scan myapp.plugins --classes --suffix .py
    quarry roots myapp.plugins
"""

__version__ = "0.1.0"
__cli_name__ = "quarry"


def main():
    """Wrapper to avoid eager import of __main__ which causes warnings with -m."""
    from .__main__ import main as _main
    return _main()
