from typing import Protocol

from compose_scaffold.models import InputBoxOptions


class InputBox(Protocol):
    async def show_input_box(self, options: InputBoxOptions) -> str | None:
        """Return the accepted text, or None when the user cancels."""
        ...
