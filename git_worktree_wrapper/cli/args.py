"""Command-line argument parsing for git-worktree-wrapper."""

import argparse
from typing import List, Optional

from git_worktree_wrapper.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the gww argument parser."""
    parser = argparse.ArgumentParser(
        prog="gww",
        description="Git worktree wrapper",
        epilog="Environment: WORKTREE_ROOT (default ~/devel/worktrees), "
        "GWW_NO_COLOUR (disable colour), GWW_INIT_SUBMODULES (init submodules after checkout). "
        "Run 'eval \"$(gww autocd)\"' in your shell to cd into checked-out worktrees.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"gww {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="{checkout,list,remove,autocd}")

    checkout = subparsers.add_parser(
        "checkout", aliases=["co"], help="Checkout a branch in a worktree"
    )
    checkout.add_argument("branch", nargs="?", help="Branch name to checkout")
    checkout.add_argument(
        "-b", dest="create", action="store_true", help="Create branch if it does not exist"
    )

    subparsers.add_parser("list", aliases=["ls"], help="List worktrees")

    remove = subparsers.add_parser("remove", aliases=["rm"], help="Remove a worktree")
    remove.add_argument("branch", nargs="?", help="Branch name to remove")

    subparsers.add_parser("autocd", help="Output shell function for auto-cd")

    # Hidden: times candidate building
    subparsers.add_parser("timechooser")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
