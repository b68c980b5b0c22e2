"""
Curve Sampler — вычисление программы по сетке x для отрисовки

Одно вычисление на сэмпл (обычно один сэмпл на горизонтальный пиксель).
Неконечный результат (inf, NaN) разрывает текущую ломаную: 1/x у нуля и
log(x) слева от нуля рисуются как разрывы, а не как ошибки.

Ошибки вычисления не пробрасываются в цикл отрисовки:
- UnboundVariableError → WARNING, пустая кривая
- MalformedProgramError → ERROR (нарушение инварианта компилятора), пустая кривая
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator

from src.compiler.errors import EvalError, MalformedProgramError, UnboundVariableError
from src.compiler.pipeline import evaluate_at
from src.core.domain.compiled_expression import CompiledExpression
from src.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)

# Верхняя граница числа сэмплов на кривую (ограничение стоимости кадра)
MAX_SAMPLES: Final[int] = 20_000

Point = tuple[float, float]


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class SamplingConfig(BaseModel):
    """
    Диапазон и плотность сэмплирования.

    samples включает обе границы: x_min и x_max вычисляются всегда.
    """

    x_min: float = Field(..., description="Левая граница диапазона x")
    x_max: float = Field(..., description="Правая граница диапазона x")
    samples: int = Field(
        ..., ge=2, le=MAX_SAMPLES, description="Число точек, включая обе границы"
    )

    model_config = {"frozen": True}

    @field_validator("x_min", "x_max")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not is_valid_float(v):
            raise ValueError(f"range bound must be finite, got {v}")
        return v

    @field_validator("x_max")
    @classmethod
    def validate_range_order(cls, v: float, info) -> float:
        """Проверка, что x_max > x_min и ширина диапазона конечна"""
        if "x_min" not in info.data:
            return v
        x_min = info.data["x_min"]
        if v <= x_min:
            raise ValueError(f"x_max {v} must be > x_min {x_min}")
        if not is_valid_float(v - x_min):
            raise ValueError(f"range width x_max - x_min overflows: [{x_min}, {v}]")
        return v

    @property
    def step(self) -> float:
        return (self.x_max - self.x_min) / (self.samples - 1)

    def x_values(self) -> list[float]:
        """Точки сетки; последняя точка ровно x_max."""
        step = self.step
        xs = [self.x_min + i * step for i in range(self.samples - 1)]
        xs.append(self.x_max)
        return xs


# =============================================================================
# РЕЗУЛЬТАТ
# =============================================================================


@dataclass(frozen=True)
class SampledCurve:
    """Кривая, разбитая на непрерывные ломаные."""

    segments: tuple[tuple[Point, ...], ...]
    samples_total: int
    samples_skipped: int

    error: Optional[EvalError] = None

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def points(self) -> list[Point]:
        """Все конечные точки подряд, без учёта разрывов."""
        return [point for segment in self.segments for point in segment]


def sample_curve(compiled: CompiledExpression, config: SamplingConfig) -> SampledCurve:
    """
    Сэмплирование скомпилированного выражения по сетке config.

    Args:
        compiled: Программа из compile_expression
        config: Диапазон и число точек

    Returns:
        SampledCurve; при ошибке вычисления — пустая кривая с error
    """
    xs = config.x_values()
    segments: list[tuple[Point, ...]] = []
    current: list[Point] = []
    skipped = 0

    try:
        for x in xs:
            y = evaluate_at(compiled, x)
            if is_valid_float(y):
                current.append((x, y))
                continue
            skipped += 1
            if current:
                segments.append(tuple(current))
                current = []
    except UnboundVariableError as e:
        logger.warning("Cannot plot %r: %s", compiled.source, e)
        return SampledCurve(segments=(), samples_total=len(xs), samples_skipped=len(xs), error=e)
    except MalformedProgramError as e:
        logger.error("Malformed program for %r (%s): %s", compiled.source, compiled, e)
        return SampledCurve(segments=(), samples_total=len(xs), samples_skipped=len(xs), error=e)

    if current:
        segments.append(tuple(current))

    return SampledCurve(
        segments=tuple(segments),
        samples_total=len(xs),
        samples_skipped=skipped,
    )
