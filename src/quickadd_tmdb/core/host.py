"""
Host collaborator contract.

The capture flow never talks to a terminal or a note application directly.
It asks a ``QuickAddApi`` for text and choices and hands the final variables
back through ``QuickAdd.variables``.
"""

from typing import Any, Callable, Dict, Optional, Sequence


class QuickAddApi:
    """Prompt widgets offered by the host."""

    def input_prompt(self, message: str) -> str:
        """Ask the user for a single line of text."""
        raise NotImplementedError

    def suggester(self, display: Callable[[Any], str], items: Sequence[Any]) -> Any:
        """Let the user pick one of ``items``; ``display`` gives each item's label."""
        raise NotImplementedError


class QuickAdd:
    """Handle passed to ``run()``: the prompt API plus the output slot."""

    def __init__(self, quick_add_api: QuickAddApi, variables: Optional[Dict[str, Any]] = None):
        self.quick_add_api = quick_add_api
        self.variables = variables
