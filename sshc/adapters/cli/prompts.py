"""
Interactive user prompts
"""
from typing import Callable, Iterable, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion, CompleteEvent
from prompt_toolkit.document import Document
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output
from prompt_toolkit.validation import Validator, ValidationError
from rich.console import Console
from rich.prompt import Prompt, Confirm

from ...core.interfaces import PromptProvider
from ...core.logging import get_stdout_console
from ...domain.connections.models import ConnectionChoice
from ...domain.connections.selector import resolve_selection

ChoiceSource = Callable[[str], Sequence[ConnectionChoice]]


class ConnectionCompleter(Completer):
    """Completion menu rebuilt from the choice source on every keystroke"""

    def __init__(self, source: ChoiceSource):
        self.source = source

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text
        for choice in self.source(text):
            yield Completion(choice.key, start_position=-len(text), display=choice.display_label)


class ConnectionValidator(Validator):
    """Only accept text that selects a saved connection"""

    def __init__(self, source: ChoiceSource):
        self.source = source

    def validate(self, document: Document) -> None:
        if resolve_selection(self.source(document.text), document.text) is None:
            raise ValidationError(
                message="No saved connection matches",
                cursor_position=len(document.text),
            )


class InteractivePromptProvider(PromptProvider):
    """Rich prompts for text and confirmation, prompt_toolkit for filtered selection"""

    def __init__(
        self,
        console: Optional[Console] = None,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ):
        self.console = console or get_stdout_console()
        self.input = input
        self.output = output

    def prompt(self, message: str, default: Optional[str] = None) -> str:
        """Prompt user for input; an empty answer returns the default"""
        if default is None:
            return Prompt.ask(message, default="", show_default=False, console=self.console)
        return Prompt.ask(message, default=default, console=self.console)

    def confirm(self, message: str, default: bool = False) -> bool:
        """Prompt user for confirmation"""
        return Confirm.ask(message, default=default, console=self.console)

    def select(self, message: str, source: ChoiceSource) -> str:
        """
        Type-to-filter selection.

        Enter takes the label typed exactly, or else the first match; text
        matching no label is rejected and the prompt stays open.
        """
        session: PromptSession = PromptSession(input=self.input, output=self.output)
        text = session.prompt(
            f"{message} ",
            completer=ConnectionCompleter(source),
            complete_while_typing=True,
            validator=ConnectionValidator(source),
            validate_while_typing=False,
            bottom_toolbar="Type to filter, Tab to browse, Enter to choose",
        )
        return resolve_selection(source(text), text)
