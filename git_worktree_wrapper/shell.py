"""Shell integration for auto-cd."""

from git_worktree_wrapper.constants import CD_PREFIX

AUTOCD_TEMPLATE = """\
gww() {{
    local output
    output=$(command gww "$@")
    local exit_code=$?
    echo "$output"
    if [ $exit_code -eq 0 ]; then
        local cd_path
        cd_path=$(echo "$output" | grep "^{prefix}" | cut -d: -f2-)
        [ -n "$cd_path" ] && cd "$cd_path"
    fi
    return $exit_code
}}

_gww_cd() {{
    local output
    output=$(command gww checkout "$@")
    local exit_code=$?
    if [ $exit_code -ne 0 ]; then
        echo "$output"
        return $exit_code
    fi
    local cd_path
    cd_path=$(echo "$output" | grep "^{prefix}" | cut -d: -f2-)
    [ -n "$cd_path" ] && cd "$cd_path"
}}
"""


def autocd_script(prefix: str = CD_PREFIX) -> str:
    """Shell functions to source (`eval "$(gww autocd)"`) for auto-cd."""
    return AUTOCD_TEMPLATE.format(prefix=prefix)
