"""Interactive fuzzy picker for git-worktree-wrapper using Textual."""

from typing import List, Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option

from git_worktree_wrapper.constants import PROMPT_SELECT_BRANCH
from git_worktree_wrapper.formatters import format_candidate_label
from git_worktree_wrapper.models.branch import BranchCandidate
from git_worktree_wrapper.services.fuzzy import fuzzy_filter
from git_worktree_wrapper.logging_config import get_logger

logger = get_logger(__name__)


class BranchPickerApp(App[Optional[int]]):
    """Type to narrow the ranked candidates; Enter picks, Escape cancels.

    The return value is the index of the chosen candidate in the list the app
    was created with, or None when cancelled.
    """

    DEFAULT_CSS = """
    #picker {
        height: 100%;
        padding: 0 1;
    }

    #picker-prompt {
        height: auto;
        padding: 1 0 0 0;
        text-style: bold;
    }

    #picker-query {
        margin: 1 0;
    }

    #picker-options {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
        Binding("up", "cursor_up", "Up", show=False, priority=True),
        Binding("down", "cursor_down", "Down", show=False, priority=True),
    ]

    def __init__(
        self,
        candidates: Sequence[BranchCandidate],
        prompt: str = PROMPT_SELECT_BRANCH,
        use_color: bool = True,
    ):
        super().__init__()
        self.candidates = list(candidates)
        self.prompt_text = prompt
        self.use_color = use_color
        self.visible: List[int] = []

    def compose(self) -> ComposeResult:
        with Vertical(id="picker"):
            yield Static(self.prompt_text, id="picker-prompt")
            yield Input(placeholder="Type to filter", id="picker-query")
            yield OptionList(id="picker-options")

    def on_mount(self) -> None:
        self._refresh_options("")
        self.query_one("#picker-query", Input).focus()

    def _refresh_options(self, query: str) -> None:
        """Rebuild the option list for the current query."""
        matches = fuzzy_filter(query, self.candidates)
        positions = {id(candidate): index for index, candidate in enumerate(self.candidates)}
        self.visible = [positions[id(candidate)] for candidate in matches]

        option_list = self.query_one("#picker-options", OptionList)
        option_list.clear_options()
        option_list.add_options(
            [
                Option(format_candidate_label(self.candidates[index], self.use_color), id=str(index))
                for index in self.visible
            ]
        )
        if self.visible:
            option_list.highlighted = 0

    def on_input_changed(self, event: Input.Changed) -> None:
        self._refresh_options(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        option_list = self.query_one("#picker-options", OptionList)
        if option_list.highlighted is None:
            # Nothing matches the query; keep waiting for input
            return
        option = option_list.get_option_at_index(option_list.highlighted)
        self.exit(int(option.id))

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.exit(int(event.option.id))

    def action_cursor_up(self) -> None:
        self.query_one("#picker-options", OptionList).action_cursor_up()

    def action_cursor_down(self) -> None:
        self.query_one("#picker-options", OptionList).action_cursor_down()

    def action_cancel(self) -> None:
        self.exit(None)


class TextualPicker:
    """Picker backed by BranchPickerApp.

    Textual draws on the terminal through stderr, so the picker stays visible
    when a shell wrapper captures stdout.
    """

    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def pick(self, candidates: Sequence[BranchCandidate], prompt: str) -> Optional[BranchCandidate]:
        app = BranchPickerApp(candidates, prompt=prompt, use_color=self.use_color)
        index = app.run()
        if index is None:
            return None
        choice = candidates[index]
        logger.debug(f"Picked {choice.branch_name}")
        return choice
