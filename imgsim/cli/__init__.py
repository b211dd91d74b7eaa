"""
CLI package for Image Similarity.

Provides the command-line interface with the pair, directory, match, hash and
config subcommands.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
"""

from __future__ import annotations

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the selected subcommand.

    Returns:
        Exit code (0 for success, 1 for error)

    Examples:
        >>> # Called from __main__.py
        >>> exit_code = main()
        >>> sys.exit(exit_code)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    'main',
    'CLIOrchestrator',
    'setup_logging',
    'create_parser',
    'parse_arguments',
]
