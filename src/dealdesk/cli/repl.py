"""The interactive command loop."""

from loguru import logger

from dealdesk.cli.commands import HELP, parse_command
from dealdesk.cli.handlers import CommandResult, ShopContext, dispatch

COMMAND_PROMPT = f"{HELP}. Enter the command:"
FAREWELL = "See you later!"


def run_repl(ctx: ShopContext) -> None:
    """Prompt, dispatch and repeat until the exit command or end of input.

    Exceptions raised by a handler end the loop and propagate.
    """
    while True:
        line = ctx.terminal.ask(COMMAND_PROMPT)
        if line is None:
            logger.debug("End of input")
            break

        command = parse_command(line)
        with logger.contextualize(command=command.name.lower()):
            logger.debug("Dispatching {!r}", line)
            if dispatch(ctx, command) is CommandResult.EXIT:
                break

    ctx.terminal.say(FAREWELL)
