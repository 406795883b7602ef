"""Line-oriented console I/O."""

from typing import TextIO

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

console = Console()


def parse_int(text: str | None) -> int:
    """Parse an integer answer.

    Raises:
        ValueError: If the answer is missing or not an integer.
    """
    try:
        return int((text or "").strip())
    except ValueError as e:
        raise ValueError(f"{text!r} is not a valid integer") from e


def parse_float(text: str | None) -> float:
    try:
        return float((text or "").strip())
    except ValueError as e:
        raise ValueError(f"{text!r} is not a valid number") from e


class LinePrompt(Prompt):
    """Plain text prompt shown on its own line.

    An exhausted input stream raises ``EOFError``, the same as ``input()``
    does on a closed stdin.
    """

    prompt_suffix = "\n"

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: Text | str,
        password: bool,
        stream: TextIO | None = None,
    ) -> str:
        answer = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and answer == "":
            raise EOFError
        return answer


class Terminal:
    """Prompts on a rich console and reads the answers.

    Output is printed without markup so that user-entered values and the
    ``[p=products,...]`` hints are shown literally. Domain entities are
    printed through ``str`` so that they keep their one-line form.
    """

    def __init__(self, console: Console = console, stdin: TextIO | None = None):
        self.console = console
        self._stdin = stdin

    def say(self, message: object = "") -> None:
        self.console.print(str(message), markup=False, highlight=False, soft_wrap=True)

    def warn(self, message: object) -> None:
        self.console.print(
            str(message), style="yellow", markup=False, highlight=False, soft_wrap=True
        )

    def ask(self, prompt: str) -> str | None:
        """Show ``prompt`` and read one stripped answer; ``None`` means end of input."""
        try:
            return LinePrompt.ask(Text(prompt), console=self.console, stream=self._stdin)
        except EOFError:
            return None

    def ask_text(self, prompt: str, default: str | None = None) -> str | None:
        """Read an answer, falling back to ``default`` when it is empty."""
        answer = self.ask(prompt)
        if not answer:
            return default
        return answer

    def ask_int(self, prompt: str) -> int:
        return parse_int(self.ask(prompt))
