"""Interactive prompts over a text input/output stream (stdin/stdout by default)."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import IO, Any

from template_tooling.bootstrap.config import PACKAGE_MANAGERS

log = logging.getLogger(__name__)


class Prompter:
    """Sequential question/answer over one input and one output stream.

    Use as a context manager; it is closed on every exit path and rejects
    further questions once closed. End of input reads as an empty answer.
    """

    def __init__(
        self, input_stream: IO[str] | None = None, output_stream: IO[str] | None = None
    ) -> None:
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout
        self.closed = False

    def __enter__(self) -> Prompter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def say(self, text: str = "") -> None:
        self._output.write(text + "\n")

    def ask(self, query: str) -> str:
        """Write query and return the next input line without its line ending."""
        if self.closed:
            msg = "prompter is closed"
            raise ValueError(msg)
        self._output.write(query)
        self._output.flush()
        return self._input.readline().rstrip("\r\n")

    def close(self) -> None:
        if not self.closed:
            self._output.flush()
            self.closed = True


def prompt_for_options(prompter: Prompter, options: Mapping[str, Any]) -> dict[str, Any]:
    """Ask for name, description and package manager; blank answers keep the current value."""
    out = dict(options)
    prompter.say("\n📦 Bootstrap Configuration\n")

    name = prompter.ask(f"Project name [{out['name']}]: ").strip()
    if name:
        out["name"] = name

    description = prompter.ask(f"Project description [{out['description']}]: ").strip()
    if description:
        out["description"] = description

    prompter.say(f"\nPackage manager options: {', '.join(PACKAGE_MANAGERS)}")
    pm = prompter.ask(f"Package manager [{out['package_manager']}]: ").strip()
    if pm in PACKAGE_MANAGERS:
        out["package_manager"] = pm
    elif pm:
        log.warning("Invalid package manager %r, using %s", pm, out["package_manager"])
    return out


def confirm_changes(prompter: Prompter) -> bool:
    """False only for n/no (any case); empty input accepts."""
    answer = prompter.ask("\n❓ Apply these changes? (Y/n): ").strip().lower()
    return answer not in ("n", "no")
