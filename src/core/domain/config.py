"""
ArithmeticConfig — конфигурация операций фиксированной точности

Immutable Pydantic модель. Передаётся явно в divide / sqrt / pow;
при отсутствии используется экземпляр по умолчанию.
"""

from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# DEFAULTS
# =============================================================================

# Количество digit-groups после точки для div и sqrt (5 групп = 45 знаков)
DEFAULT_PRECISION: Final[int] = 5

# Максимум двоичных разрядов дробной степени, учитываемых pow_ufrac
DEFAULT_FRACTION_BITS: Final[int] = 48


# =============================================================================
# CONFIG
# =============================================================================


class ArithmeticConfig(BaseModel):
    """
    Параметры точности арифметики.

    precision измеряется в digit-groups (по 9 десятичных знаков),
    а не в десятичных знаках.
    """

    precision: int = Field(
        DEFAULT_PRECISION,
        ge=1,
        le=1000,
        description="Дробные digit-groups результата div/sqrt",
    )
    fraction_bits: int = Field(
        DEFAULT_FRACTION_BITS,
        ge=1,
        le=256,
        description="Двоичные разряды дробной степени для pow_ufrac",
    )

    model_config = {"frozen": True}


DEFAULT_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()


def resolve_config(config: ArithmeticConfig | None) -> ArithmeticConfig:
    """Вернуть config или DEFAULT_CONFIG."""
    return config or DEFAULT_CONFIG
