"""Shell integration snippets.

markd cannot change its parent shell's directory, so these functions wrap
`markd get` in command substitution and `cd` into whatever it printed.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer


class Shell(str, Enum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


_POSIX_SNIPPET = """\
# markd shell integration, load with: eval "$(markd shell {shell})"
goto() {{
    local dir
    dir="$(command markd get --failsafe -- "${{1:-}}")" && builtin cd -- "$dir"
}}

fgoto() {{
    local dir
    dir="$(command markd list --plain | fzf --query="${{1:-}}" | cut -d: -f2-)"
    [ -n "$dir" ] && builtin cd -- "$dir"
}}
"""

_FISH_SNIPPET = """\
# markd shell integration, load with: markd shell fish | source
function goto
    set -l dir (command markd get --failsafe -- $argv[1])
    and builtin cd -- $dir
end

function fgoto
    set -l dir (command markd list --plain | fzf --query="$argv[1]" | cut -d: -f2-)
    and test -n "$dir"
    and builtin cd -- $dir
end
"""


def render_snippet(shell: Shell) -> str:
    if shell is Shell.FISH:
        return _FISH_SNIPPET
    return _POSIX_SNIPPET.format(shell=shell.value)


def shell(
    name: Annotated[Shell, typer.Argument(help="Shell to generate functions for", case_sensitive=False)],
) -> None:
    """Print `goto` and `fgoto` shell functions.

    Examples:

        # ~/.bashrc or ~/.zshrc
        eval "$(markd shell bash)"

        # ~/.config/fish/config.fish
        markd shell fish | source
    """
    typer.echo(render_snippet(name), nl=False)
