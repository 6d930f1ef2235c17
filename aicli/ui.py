from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.text import Text

from .config import Config
from .executor import ExecutionOutcome, OutcomeStatus

console = Console()


def display_command(command: str) -> None:
    """Show a generated command before asking about it."""
    console.print("\n[blue]Generated Command:[/blue]")
    console.print(Text(command, style="yellow"))


def confirm_execution() -> bool:
    """Ask the user to confirm running the command shown last."""
    return Confirm.ask("Do you want to execute this command?", default=False, console=console)


def display_skipped() -> None:
    console.print("[bright_black]Command skipped.[/bright_black]")


def display_executing() -> None:
    console.print("\n[blue]Executing command...[/blue]")


def display_outcome(outcome: ExecutionOutcome) -> None:
    """Display the result of a command that was run."""
    if outcome.status is OutcomeStatus.SKIPPED:
        display_skipped()
        return

    if outcome.status is OutcomeStatus.FAILED:
        display_error(outcome.error or f"Command failed: {outcome.command}")
        return

    if outcome.status is OutcomeStatus.SUCCEEDED_WITH_WARNING:
        console.print(Text(f"Warning: {outcome.stderr.rstrip()}", style="yellow"))

    content = outcome.stdout.rstrip("\n") if outcome.stdout else "Command executed successfully."
    console.print(Panel(Text(content), title="[green]Output[/green]", border_style="green"))


def display_error(message: str) -> None:
    console.print(Text(f"Error: {message}", style="red"))


def display_missing_api_key() -> None:
    """Tell the user how to configure the API key."""
    console.print("[red]OpenAI API key is not configured.[/red]")
    console.print("[yellow]Please run: aicli config --set-api-key YOUR_API_KEY[/yellow]")


def display_config(config: Config) -> None:
    console.print("[blue]Current Configuration:[/blue]")
    console.print(Text(f"API Key: {config.redacted_api_key()}"))
    console.print(Text(f"Model: {config.model}"))


def prompt_instruction() -> str:
    """Ask for an instruction until a non-blank one is entered."""
    while True:
        instruction = Prompt.ask("Enter your instruction", console=console)
        if instruction and instruction.strip():
            return instruction.strip()
        console.print("[red]Instruction cannot be empty[/red]")
