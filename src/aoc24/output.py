"""
The result channel. Answers go here, diagnostics go through `logging`.

Code should print through `output.console` rather than importing `console` directly,
so that the console can be swapped out (for example by tests).
"""

from rich.console import Console


def make_console(**kwargs) -> Console:
    """
    A console that never wraps lines or substitutes `:name:` emoji codes, so every
    answer stays on its own line exactly as the solution rendered it.
    """
    return Console(highlight=False, soft_wrap=True, emoji=False, **kwargs)


console = make_console()
errors = make_console(stderr=True)
