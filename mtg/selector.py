"""
Interactive meeting selection.
"""

from typing import Callable, List, Optional, Sequence

import typer

from mtg.core.exceptions import NoMeetingsConfiguredError, NoSelectionError
from mtg.core.logging import get_logger


logger = get_logger("selector")

PROMPT_MESSAGE = "Choose a meeting to join"


def _typer_prompt(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


class ConsoleSelector:
    """
    Numbered, searchable single-choice prompt.

    Answer with a number to pick that entry or with text to narrow the list.
    An empty answer, Ctrl-C or end of input cancels.
    """

    def __init__(
        self,
        prompt: Callable[[str], str] = _typer_prompt,
        echo: Callable[[str], None] = typer.echo,
        message: str = PROMPT_MESSAGE,
    ):
        self.prompt = prompt
        self.echo = echo
        self.message = message

    def select(self, options: Sequence[str]) -> str:
        """
        Block until the user picks one of ``options``.

        Raises:
            NoMeetingsConfiguredError: ``options`` is empty.
            NoSelectionError: the user cancelled.
        """
        options = list(options)
        if not options:
            raise NoMeetingsConfiguredError()

        shown = options
        while True:
            self._show(shown)
            answer = self._ask()
            if not answer:
                raise NoSelectionError()

            choice = self._resolve(answer, shown, options)
            if choice is not None:
                logger.debug(f"Selected '{choice}'")
                return choice

            matches = search(answer, options)
            if matches:
                shown = matches
            else:
                self.echo(f"No meetings match '{answer}'.")
                shown = options

    def _ask(self) -> str:
        try:
            return self.prompt(f"{self.message} (number or search, empty to cancel)").strip()
        except (typer.Abort, KeyboardInterrupt, EOFError):
            self.echo("")
            raise NoSelectionError()

    def _show(self, shown: List[str]) -> None:
        for index, name in enumerate(shown, start=1):
            self.echo(f"  {index:>2}) {name}")

    @staticmethod
    def _resolve(answer: str, shown: List[str], options: List[str]) -> Optional[str]:
        # A meeting named "2024" is picked by name, not as entry 2024
        lowered = answer.lower()
        if lowered in options:
            return lowered

        if answer.isdigit():
            index = int(answer)
            if 1 <= index <= len(shown):
                return shown[index - 1]
            return None

        matches = search(answer, options)
        if len(matches) == 1:
            return matches[0]
        return None


def search(term: str, options: Sequence[str]) -> List[str]:
    """Options containing ``term``, case-insensitively, in their original order."""
    term = term.lower()
    return [option for option in options if term in option.lower()]
