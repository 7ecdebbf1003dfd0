"""
salt-state - a short-hand wrapper around salt-call and salt.

Usage:
    state sls webserver
    state -v up
    state -g sync 'web*'
"""

__version__ = "0.1.0"


def main() -> None:
    """Run the ``state`` command-line interface."""
    from salt_state.cli.app import main as _main

    _main()


__all__ = ["__version__", "main"]
