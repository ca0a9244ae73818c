from __future__ import annotations

import asyncio

from rich.console import Console
from rich.markup import escape

from compose_scaffold.models import InputBoxOptions


def _prompt_text(options: InputBoxOptions) -> str:
    text = escape(options.prompt or "")
    hint = options.place_holder if options.place_holder is not None else options.value
    if hint:
        text = f"{text} [cyan]({escape(hint)})[/cyan]"
    return f"{text}: "


class ConsoleInputBox:
    """Terminal input box. Implements the ``InputBox`` protocol.

    The answer is returned exactly as typed; an empty line accepts the
    pre-filled value.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    async def show_input_box(self, options: InputBoxOptions) -> str | None:
        return await asyncio.to_thread(self._ask, options)

    def _ask(self, options: InputBoxOptions) -> str | None:
        prompt = _prompt_text(options)
        while True:
            try:
                answer = self._console.input(prompt)
            except (EOFError, KeyboardInterrupt):
                return None
            if answer == "" and options.value is not None:
                answer = options.value
            message = options.validate_input(answer) if options.validate_input else None
            if message is None:
                return answer
            self._console.print(f"[red]{escape(message)}[/red]")
