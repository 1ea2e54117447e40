"""Interactive prompts for component selection and confirmations.

Commands only talk to the ``Prompter`` interface, so tests can replace it with
a scripted stand-in.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.prompt import Confirm, Prompt

from .utils import console, print_choices_table


@dataclass(frozen=True)
class Choice:
    """One selectable option: the returned ``value`` plus what is shown."""

    value: str
    label: str
    description: str = ""


class Prompter:
    """Rich-backed prompts.

    ``select`` and ``confirm`` return ``None`` / ``False`` when the user
    aborts with Ctrl+C or Ctrl+D, which the commands treat as a cancellation.
    """

    def select(self, message: str, choices: list[Choice]) -> str | None:
        """Show a numbered table and return the chosen ``Choice.value``."""
        if not choices:
            return None
        print_choices_table([(c.label, c.description) for c in choices], title=message)
        numbers = [str(i) for i in range(1, len(choices) + 1)]
        try:
            answer = Prompt.ask(
                "Enter a number", choices=numbers, default="1", console=console
            )
        except (KeyboardInterrupt, EOFError):
            return None
        return choices[int(answer) - 1].value

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return Confirm.ask(message, default=default, console=console)
        except (KeyboardInterrupt, EOFError):
            return False


class AutoConfirmPrompter(Prompter):
    """Answers every confirmation with yes (``yureka remove --yes``)."""

    def confirm(self, message: str, default: bool = False) -> bool:
        console.print(f"{message} [dim](yes)[/dim]")
        return True
