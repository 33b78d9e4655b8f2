"""Command-line interface for git-worktree-wrapper"""

import os
import sys
import time
from typing import List, Optional

from rich.console import Console

from git_worktree_wrapper.cli.args import parse_args
from git_worktree_wrapper.config import Config
from git_worktree_wrapper.core import WorktreeWrapper
from git_worktree_wrapper.exceptions import GitWorktreeWrapperError, SelectionCancelled
from git_worktree_wrapper.formatters import format_duration
from git_worktree_wrapper.logging_config import setup_logging
from git_worktree_wrapper.shell import autocd_script
from git_worktree_wrapper.ui.picker import TextualPicker

COMMAND_ALIASES = {
    "co": "checkout",
    "ls": "list",
    "rm": "remove",
}

# Diagnostics only; stdout carries command output and the auto-cd line
console = Console(stderr=True)


def _run_command(command: str, parsed_args, config: Config) -> None:
    if command == "autocd":
        sys.stdout.write(autocd_script())
        return

    wrapper = WorktreeWrapper(os.getcwd(), config, picker=TextualPicker(use_color=config.use_color))

    if command == "checkout":
        wrapper.resolve_and_checkout(
            getattr(parsed_args, "branch", None),
            create=getattr(parsed_args, "create", False),
        )
    elif command == "list":
        sys.stdout.write(wrapper.raw_list())
    elif command == "remove":
        wrapper.resolve_and_remove(parsed_args.branch)
    elif command == "timechooser":
        start = time.perf_counter()
        candidates = wrapper.build_candidates()
        elapsed = time.perf_counter() - start
        print(f"Built {len(candidates)} branch entries in {format_duration(elapsed)}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    global console
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        # Environment is read here, once; everything below gets the Config
        config = Config.from_env(verbose=parsed_args.verbose, debug=parsed_args.debug)
        console = Console(stderr=True, no_color=config.no_colour)
        setup_logging(verbose=config.verbose, debug=config.debug, use_color=config.use_color)

        if config.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}", markup=False)

        command = COMMAND_ALIASES.get(parsed_args.command, parsed_args.command)
        if command is None:
            console.print(
                "No command provided; defaulting to `checkout`. Use `gww --help` for options.",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            command = "checkout"

        _run_command(command, parsed_args, config)
        return 0
    except SelectionCancelled:
        # Aborting the picker is a normal outcome
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except GitWorktreeWrapperError as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        return 1
    except Exception as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
