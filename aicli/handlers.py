import logging
import os
from typing import Callable, List, Optional, Sequence

from . import ui
from .api import CompletionClient, generate_command
from .config import Config, ConfigStore
from .executor import CommandExecutor, ExecutionOutcome, executor as default_executor
from .parser import split_commands

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "OPENAI_API_KEY"


def process_commands(
    commands: Sequence[str],
    executor: Optional[CommandExecutor] = None,
    confirm: Optional[Callable[[], bool]] = None,
) -> List[ExecutionOutcome]:
    """
    Offer each command for confirmation and run the accepted ones.

    Commands are handled one at a time in order. A command is only offered
    after the previous one has been skipped or has finished running, and a
    failing command never stops the rest of the batch.

    Args:
        commands: The commands to offer, in order.
        executor: Runs accepted commands. Defaults to the shared executor.
        confirm: Asks the user about the command shown last.

    Returns:
        One outcome per command, in the same order.
    """
    executor = executor or default_executor
    confirm = confirm or ui.confirm_execution

    outcomes = []
    for command in commands:
        ui.display_command(command)

        if not confirm():
            logger.info(f"Command skipped: {command}")
            ui.display_skipped()
            outcomes.append(ExecutionOutcome.skipped(command))
            continue

        ui.display_executing()
        outcome = executor.execute_command(command)
        ui.display_outcome(outcome)
        outcomes.append(outcome)

    return outcomes


def handle_generate(
    instruction: Optional[str],
    store: ConfigStore,
    client: Optional[CompletionClient] = None,
    executor: Optional[CommandExecutor] = None,
) -> int:
    """Handler for the default generate-and-run flow. Returns the exit code."""
    config = store.load()
    if not config.api_key:
        config.api_key = os.environ.get(API_KEY_ENV_VAR, "")

    if not config.api_key:
        logger.error("OpenAI API key is not configured")
        ui.display_missing_api_key()
        return 1

    if not instruction or not instruction.strip():
        instruction = ui.prompt_instruction()

    raw = generate_command(instruction, config, client=client)
    commands = split_commands(raw)
    if not commands:
        logger.info("Nothing to run for instruction: %s", instruction)
        return 0

    process_commands(commands, executor=executor)
    return 0


def handle_config(
    store: ConfigStore,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    view: bool = False,
) -> int:
    """Handler for the 'config' command."""
    config = store.load()

    if api_key is not None:
        config.api_key = api_key
        store.save(config)

    model_set = False
    if model is not None:
        if model.strip():
            config.model = model.strip()
            store.save(config)
            model_set = True
        else:
            ui.display_error("Model name cannot be empty; keeping the current model.")

    if view or (api_key is None and not model_set):
        ui.display_config(config)

    return 0
