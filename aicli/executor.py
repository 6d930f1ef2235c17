import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Configure logging
logger = logging.getLogger(__name__)


class OutcomeStatus(Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SUCCEEDED_WITH_WARNING = "succeeded_with_warning"


@dataclass
class ExecutionOutcome:
    """What happened to a single command."""

    command: str
    status: OutcomeStatus
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None
    return_code: Optional[int] = None

    @classmethod
    def skipped(cls, command: str) -> "ExecutionOutcome":
        return cls(command=command, status=OutcomeStatus.SKIPPED)

    @property
    def success(self) -> bool:
        return self.status in (OutcomeStatus.SUCCEEDED, OutcomeStatus.SUCCEEDED_WITH_WARNING)


class CommandExecutor:
    """Handles execution of shell commands."""

    def execute_command(self, command: str) -> ExecutionOutcome:
        """
        Execute a single shell command.

        The command string is handed to the system shell as-is and the call
        blocks until the process exits. Failures are reported in the returned
        outcome rather than raised.

        Args:
            command: The shell command to execute

        Returns:
            The outcome of running the command
        """
        logger.info(f"Executing command: {command}")

        try:
            process = subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                shell=True
            )
            stdout, stderr = process.communicate()
        except OSError as e:
            logger.exception(f"Error executing command '{command}': {str(e)}")
            return ExecutionOutcome(command=command, status=OutcomeStatus.FAILED, error=str(e))

        stdout = stdout or ""
        stderr = stderr or ""

        if process.returncode != 0:
            logger.error(f"Command failed with return code {process.returncode}: {command}")
            logger.error(f"stderr: {stderr}")
            message = f"Command failed with exit code {process.returncode}: {command}"
            if stderr.strip():
                message = f"{message}\n{stderr.strip()}"
            return ExecutionOutcome(
                command=command,
                status=OutcomeStatus.FAILED,
                stdout=stdout,
                stderr=stderr,
                error=message,
                return_code=process.returncode,
            )

        logger.info(f"Command executed successfully: {command}")
        status = OutcomeStatus.SUCCEEDED_WITH_WARNING if stderr.strip() else OutcomeStatus.SUCCEEDED
        return ExecutionOutcome(
            command=command,
            status=status,
            stdout=stdout,
            stderr=stderr,
            return_code=process.returncode,
        )


# Create a global executor instance
executor = CommandExecutor()
