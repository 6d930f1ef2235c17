import json
import logging
import platform
import sys
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError

from .config import Config
from . import ui

# Configure logging
logger = logging.getLogger(__name__)

TEMPERATURE = 0.3
MAX_TOKENS = 500

SYSTEM_PROMPT = """You are a helpful assistant that converts natural language instructions into shell commands.
Generate shell commands that accurately fulfill the user's request.
For complex requests that require multiple steps, you can generate multiple commands separated by newlines.
Each line will be treated as a separate command that requires confirmation.
You can also use '&&' to chain commands that should be executed together as a single unit.
Generate only the command without explanation or markdown.
System information: {host}"""


@dataclass(frozen=True)
class HostContext:
    """Facts about the machine the commands will run on."""

    platform: str
    release: str
    type: str
    arch: str

    @classmethod
    def capture(cls) -> "HostContext":
        return cls(
            platform=sys.platform,
            release=platform.release(),
            type=platform.system(),
            arch=platform.machine(),
        )

    def to_json(self) -> str:
        return json.dumps(asdict(self))


class CompletionClient:
    """A client for turning instructions into shell commands with the OpenAI API."""

    def __init__(self, api_key: str, model: str, client: Optional[Any] = None):
        """
        Initializes the CompletionClient.

        Args:
            api_key: The OpenAI API key.
            model: The model to use for generation.
            client: An already constructed OpenAI client, used instead of
                building one from ``api_key``.
        """
        self.model = model
        self.client = client if client is not None else OpenAI(api_key=api_key)
        logger.info(f"Initialized completion client with model: {self.model}")

    def build_messages(self, instruction: str, host: Optional[HostContext] = None) -> List[Dict[str, str]]:
        """Constructs the system and user messages for one request."""
        host = host or HostContext.capture()
        return [
            {"role": "system", "content": SYSTEM_PROMPT.format(host=host.to_json())},
            {"role": "user", "content": f"Convert this request to a shell command: {instruction}"},
        ]

    def generate(self, instruction: str) -> Optional[str]:
        """
        Generates shell commands from a natural language instruction.

        Returns:
            The stripped text of the first completion, or None if the request
            failed or the model returned no text.
        """
        messages = self.build_messages(instruction)
        try:
            with ui.console.status("Generating command..."):
                response = self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=TEMPERATURE,
                    max_tokens=MAX_TOKENS,
                )
        except OpenAIError as e:
            logger.error(f"Error generating shell commands: {e}")
            ui.display_error(str(e))
            return None

        if not response.choices:
            logger.warning("Completion response contained no choices")
            return None

        content = response.choices[0].message.content
        if not content or not content.strip():
            return None
        return content.strip()


def generate_command(instruction: str, config: Config, client: Optional[CompletionClient] = None) -> Optional[str]:
    """Generates shell commands for an instruction using the configured model."""
    client = client or CompletionClient(api_key=config.api_key, model=config.model)
    return client.generate(instruction)
