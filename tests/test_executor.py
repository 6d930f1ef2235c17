import subprocess
import sys
import unittest
from unittest.mock import patch, MagicMock

from aicli.executor import CommandExecutor, ExecutionOutcome, OutcomeStatus


class TestCommandExecutor(unittest.TestCase):
    """Test cases for the CommandExecutor class."""

    def setUp(self):
        """Set up test fixtures."""
        self.executor = CommandExecutor()

    def _mock_process(self, mock_popen, returncode, stdout, stderr):
        process_mock = MagicMock()
        process_mock.returncode = returncode
        process_mock.communicate.return_value = (stdout, stderr)
        mock_popen.return_value = process_mock

    @patch('aicli.executor.subprocess.Popen')
    def test_execute_command_success(self, mock_popen):
        self._mock_process(mock_popen, 0, "command output", "")

        outcome = self.executor.execute_command("echo 'hello' && ls")

        self.assertEqual(outcome.status, OutcomeStatus.SUCCEEDED)
        self.assertTrue(outcome.success)
        self.assertEqual(outcome.stdout, "command output")
        self.assertEqual(outcome.return_code, 0)

        # The command string reaches the shell untouched
        mock_popen.assert_called_once()
        args, kwargs = mock_popen.call_args
        self.assertEqual(args[0], "echo 'hello' && ls")
        self.assertTrue(kwargs["shell"])

    @patch('aicli.executor.subprocess.Popen')
    def test_execute_command_failure(self, mock_popen):
        self._mock_process(mock_popen, 1, "", "command error")

        outcome = self.executor.execute_command("invalid_command")

        self.assertEqual(outcome.status, OutcomeStatus.FAILED)
        self.assertFalse(outcome.success)
        self.assertEqual(outcome.stderr, "command error")
        self.assertIn("exit code 1", outcome.error)
        self.assertIn("command error", outcome.error)

    @patch('aicli.executor.subprocess.Popen')
    def test_execute_command_with_stderr_is_a_warning(self, mock_popen):
        self._mock_process(mock_popen, 0, "partial output", "deprecated flag")

        outcome = self.executor.execute_command("tool --old-flag")

        self.assertEqual(outcome.status, OutcomeStatus.SUCCEEDED_WITH_WARNING)
        self.assertTrue(outcome.success)
        self.assertEqual(outcome.stdout, "partial output")
        self.assertEqual(outcome.stderr, "deprecated flag")

    @patch('aicli.executor.subprocess.Popen')
    def test_execute_command_spawn_error(self, mock_popen):
        mock_popen.side_effect = OSError("no shell")

        outcome = self.executor.execute_command("ls")

        self.assertEqual(outcome.status, OutcomeStatus.FAILED)
        self.assertEqual(outcome.error, "no shell")
        self.assertIsNone(outcome.return_code)

    def test_skipped_outcome(self):
        outcome = ExecutionOutcome.skipped("rm -rf build")
        self.assertEqual(outcome.status, OutcomeStatus.SKIPPED)
        self.assertFalse(outcome.success)


@unittest.skipIf(sys.platform == "win32", "uses POSIX shell commands")
class TestCommandExecutorShell(unittest.TestCase):
    """Runs real commands through the system shell."""

    def setUp(self):
        self.executor = CommandExecutor()

    def test_echo(self):
        outcome = self.executor.execute_command("echo hi")
        self.assertEqual(outcome.status, OutcomeStatus.SUCCEEDED)
        self.assertEqual(outcome.stdout, "hi\n")

    def test_false(self):
        outcome = self.executor.execute_command("false")
        self.assertEqual(outcome.status, OutcomeStatus.FAILED)
        self.assertEqual(outcome.return_code, 1)

    def test_chained_command_runs_as_one_unit(self):
        outcome = self.executor.execute_command("echo one && echo two")
        self.assertEqual(outcome.stdout, "one\ntwo\n")

    def test_stderr_on_success(self):
        outcome = self.executor.execute_command("echo oops 1>&2")
        self.assertEqual(outcome.status, OutcomeStatus.SUCCEEDED_WITH_WARNING)
        self.assertEqual(outcome.stderr, "oops\n")

    def test_non_utf8_output_does_not_raise(self):
        outcome = self.executor.execute_command("printf '\\377\\376'")
        self.assertEqual(outcome.status, OutcomeStatus.SUCCEEDED)
        self.assertEqual(outcome.stdout, "\ufffd\ufffd")

    def test_popen_decodes_with_replacement(self):
        with patch('aicli.executor.subprocess.Popen', wraps=subprocess.Popen) as mock_popen:
            self.executor.execute_command("true")
        self.assertEqual(mock_popen.call_args.kwargs["errors"], "replace")


if __name__ == "__main__":
    unittest.main()
