"""Command Dispatcher — текстовый протокол калькулятора.

Поток токенов вида `OPNAME operand...`, разделённых пробельными символами
(в том числе переводами строк). Каждая команда даёт ровно одну строку
вывода:

| Токен | Операнды | Вывод |
|-------|----------|-------|
| ADD   | a b      | a + b |
| SUB   | a b      | a - b |
| MUL   | a b      | a * b |
| DIV   | a b      | a / b или "Division by zero error!" |
| SQRT  | a        | sqrt(a) или "Sqrt of negative number not supported!" |
| ABS   | a        | |a| |
| POW   | a b      | a ^ b или "Fractional power of negative base not supported!" |

Неизвестные токены пропускаются с предупреждением.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Final, Iterable, Iterator, Sequence, TextIO, Type

from src.core.domain.bignum import BigNum
from src.core.domain.config import ArithmeticConfig, resolve_config
from src.core.domain.errors import (
    BigNumError,
    DivisionByZero,
    InvalidFractionalPower,
    NegativeSqrt,
    ParseError,
)
from src.core.logging_config import get_logger
from src.core.math.codec import format_bignum, parse_bignum
from src.core.math.division import divide
from src.core.math.multiplication import multiply
from src.core.math.power import long_pow
from src.core.math.signed import absolute, add, subtract
from src.core.math.square_root import sqrt_signed

logger = get_logger(__name__)


# =============================================================================
# COMMANDS
# =============================================================================


class Command(str, Enum):
    """Мнемоники команд протокола."""

    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    SQRT = "SQRT"
    ABS = "ABS"
    POW = "POW"


OPERAND_COUNTS: Final[Dict[Command, int]] = {
    Command.ADD: 2,
    Command.SUB: 2,
    Command.MUL: 2,
    Command.DIV: 2,
    Command.SQRT: 1,
    Command.ABS: 1,
    Command.POW: 2,
}

# Фиксированные сообщения протокола для recoverable ошибок
ERROR_MESSAGES: Final[Dict[Type[BigNumError], str]] = {
    DivisionByZero: "Division by zero error!",
    NegativeSqrt: "Sqrt of negative number not supported!",
    InvalidFractionalPower: "Fractional power of negative base not supported!",
    ParseError: "Invalid number format!",
}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CommandResult:
    """Результат одной команды."""

    command: Command
    operands: tuple[str, ...]

    ok: bool
    output: str  # строка для печати (результат или сообщение об ошибке)
    error: str  # имя класса ошибки, "" при успехе


# =============================================================================
# DISPATCHER
# =============================================================================


def error_message(error: BigNumError) -> str:
    """Сообщение протокола для ошибки (по ближайшему классу в ERROR_MESSAGES)."""
    for error_type, message in ERROR_MESSAGES.items():
        if isinstance(error, error_type):
            return message
    return str(error)


def tokenize(stream: Iterable[str]) -> Iterator[str]:
    """Токены из потока строк (разделители — любые пробельные символы)."""
    for line in stream:
        yield from line.split()


class CommandDispatcher:
    """Исполнитель команд протокола поверх арифметического ядра.

    Не хранит состояния между командами, кроме счётчиков для итогового
    лога.
    """

    def __init__(self, config: ArithmeticConfig | None = None):
        """Инициализация dispatcher.

        Args:
            config: конфигурация точности (опционально, используется default)
        """
        self.config = resolve_config(config)
        self.commands_executed = 0
        self.commands_failed = 0
        self._handlers: Dict[Command, Callable[..., BigNum]] = {
            Command.ADD: add,
            Command.SUB: subtract,
            Command.MUL: multiply,
            Command.DIV: lambda a, b: divide(a, b, self.config),
            Command.SQRT: lambda a: sqrt_signed(a, self.config),
            Command.ABS: absolute,
            Command.POW: lambda a, b: long_pow(a, b, self.config),
        }

    def execute(self, command: Command | str, operands: Sequence[str]) -> CommandResult:
        """Выполнить одну команду.

        Args:
            command: мнемоника (Command или строка, например "ADD")
            operands: десятичные строки операндов

        Returns:
            CommandResult; recoverable ошибки не пробрасываются

        Raises:
            ValueError: неизвестная мнемоника или неверное число операндов
        """
        command = Command(command)
        expected = OPERAND_COUNTS[command]
        if len(operands) != expected:
            raise ValueError(
                f"{command.value} expects {expected} operands, got {len(operands)}"
            )

        self.commands_executed += 1
        try:
            values = [parse_bignum(operand) for operand in operands]
            result = self._handlers[command](*values)
        except BigNumError as e:
            self.commands_failed += 1
            logger.warning("%s %s failed: %s", command.value, " ".join(operands), e)
            return CommandResult(
                command=command,
                operands=tuple(operands),
                ok=False,
                output=error_message(e),
                error=type(e).__name__,
            )

        return CommandResult(
            command=command,
            operands=tuple(operands),
            ok=True,
            output=format_bignum(result),
            error="",
        )

    def run(self, tokens: Iterable[str]) -> Iterator[CommandResult]:
        """Исполнять команды из потока токенов до его окончания."""
        iterator = iter(tokens)
        for token in iterator:
            try:
                command = Command(token)
            except ValueError:
                logger.warning("Skipping unknown token: %r", token)
                continue

            operands = []
            for _ in range(OPERAND_COUNTS[command]):
                operand = next(iterator, None)
                if operand is None:
                    break
                operands.append(operand)

            if len(operands) < OPERAND_COUNTS[command]:
                logger.warning(
                    "Dropping %s: input ended after %d operand(s)",
                    command.value, len(operands),
                )
                return

            yield self.execute(command, operands)

    def run_stream(self, stream_in: TextIO, stream_out: TextIO) -> int:
        """Прочитать команды из stream_in и напечатать результаты в stream_out.

        Returns:
            Количество выполненных команд
        """
        count = 0
        for result in self.run(tokenize(stream_in)):
            stream_out.write(result.output + "\n")
            count += 1

        logger.info(
            "Session finished: %d commands, %d failed",
            self.commands_executed, self.commands_failed,
        )
        return count
