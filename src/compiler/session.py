"""Expression Session — перекомпиляция выражения при правке.

Держит последнюю успешно скомпилированную программу:
- перекомпиляция только при изменении текста (идемпотентно)
- ошибка компиляции ожидаема при наборе и не фатальна
- при ошибке программа либо сохраняется (KEEP_LAST), либо сбрасывается
  (CLEAR); частично собранная программа не сохраняется никогда
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.compiler.errors import CompileError, ExpressionSyntaxError
from src.compiler.pipeline import compile_expression, evaluate_at
from src.core.domain.compiled_expression import CompiledExpression

logger = logging.getLogger(__name__)


class RetentionPolicy(str, Enum):
    """Что делать с текущей программой при ошибке компиляции."""

    KEEP_LAST = "keep_last"
    CLEAR = "clear"


@dataclass(frozen=True)
class SessionConfig:
    """Конфигурация сессии.

    max_source_length ограничивает стоимость компиляции снаружи ядра:
    более длинный текст отвергается без токенизации.
    """

    retention_policy: RetentionPolicy = RetentionPolicy.KEEP_LAST
    max_source_length: int = 1000


@dataclass(frozen=True)
class CompileOutcome:
    """Результат обработки одной правки."""

    source: str
    compiled: Optional[CompiledExpression]
    error: Optional[CompileError]

    # Диагностика
    recompiled: bool
    details: str

    @property
    def ok(self) -> bool:
        return self.error is None


class ExpressionSession:
    """Сессия редактирования одного выражения.

    compiled — программа, которую рендер вычисляет в данный момент.
    После ошибки она может относиться к предыдущему тексту (KEEP_LAST).
    """

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()
        self._compiled: Optional[CompiledExpression] = None
        self._last_outcome: Optional[CompileOutcome] = None

    @property
    def compiled(self) -> Optional[CompiledExpression]:
        return self._compiled

    @property
    def last_outcome(self) -> Optional[CompileOutcome]:
        return self._last_outcome

    def update(self, source: str) -> CompileOutcome:
        """Обработка правки текста выражения.

        Args:
            source: новый текст выражения

        Returns:
            CompileOutcome; compiled — текущая программа сессии после правки
        """
        last = self._last_outcome
        if last is not None and last.source == source:
            outcome = CompileOutcome(
                source=source,
                compiled=self._compiled,
                error=last.error,
                recompiled=False,
                details="unchanged source: compilation skipped",
            )
            self._last_outcome = outcome
            return outcome

        try:
            if len(source) > self.config.max_source_length:
                raise ExpressionSyntaxError(
                    f"expression exceeds {self.config.max_source_length} characters"
                )
            compiled = compile_expression(source)
        except CompileError as e:
            logger.debug("Compile failed for %r: %s", source, e)
            if self.config.retention_policy == RetentionPolicy.CLEAR:
                self._compiled = None
            outcome = CompileOutcome(
                source=source,
                compiled=self._compiled,
                error=e,
                recompiled=True,
                details=f"compile failed ({type(e).__name__}), "
                f"policy={self.config.retention_policy.value}",
            )
            self._last_outcome = outcome
            return outcome

        self._compiled = compiled
        outcome = CompileOutcome(
            source=source,
            compiled=compiled,
            error=None,
            recompiled=True,
            details=f"compiled: {compiled}",
        )
        self._last_outcome = outcome
        return outcome

    def evaluate(self, x: float) -> float:
        """Вычисление текущей программы в точке x; NaN, если программы нет."""
        if self._compiled is None:
            return math.nan
        return evaluate_at(self._compiled, x)
