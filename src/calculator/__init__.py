"""Calculator — текстовый протокол команд поверх арифметического ядра."""

from .dispatcher import (
    ERROR_MESSAGES,
    OPERAND_COUNTS,
    Command,
    CommandDispatcher,
    CommandResult,
    error_message,
    tokenize,
)

__all__ = [
    "ERROR_MESSAGES",
    "OPERAND_COUNTS",
    "Command",
    "CommandDispatcher",
    "CommandResult",
    "error_message",
    "tokenize",
]
