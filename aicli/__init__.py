"""
CLI tool for converting natural language to shell commands using the OpenAI API.

This package provides a command-line interface that sends a natural language
instruction to a chat-completion model, splits the reply into individual shell
commands and asks for confirmation before running each one.
"""

__version__ = "1.0.0"
