"""
Numerical Safeguards — IEEE-754-тотальные примитивы

Модуль стандартной библиотеки math бросает исключения там, где IEEE-754
определяет результат (math.log(0), math.pow(0, -1), math.sqrt(-1), sin(inf)),
а оператор ** для отрицательного основания возвращает complex.

Здесь каждая операция определена на всех float и никогда не бросает:
- деление на ноль → ±inf (0/0 → NaN), знак нуля учитывается
- переполнение → ±inf
- выход за область определения → NaN

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключение на float-входе
2. Результат детерминирован: одинаковые входы → побитово одинаковый выход
3. Неконечный результат — валидный результат, а не ошибка
"""

import math
from typing import Callable, Final

INF: Final[float] = math.inf
NAN: Final[float] = math.nan


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Рендер трактует неконечные значения как разрыв графика.
    """
    return math.isfinite(value)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and math.fmod(value, 2.0) != 0.0


# =============================================================================
# БИНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator; при нулевом знаменателе:
        - 0/0 или NaN/0 → NaN
        - иначе ±inf со знаком sign(numerator) * sign(denominator)

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(-2.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return NAN
        return math.copysign(INF, numerator) * math.copysign(1.0, denominator)

    return numerator / denominator


def ieee_pow(base: float, exponent: float) -> float:
    """
    Возведение в степень по правилам IEEE-754 (pow из C99).

    Returns:
        base ** exponent, где:
        - переполнение → ±inf (минус только для отрицательного основания
          и нечётной целой степени)
        - 0 в отрицательной степени → ±inf (минус только для -0.0 и
          нечётной целой степени)
        - отрицательное основание в дробной степени → NaN

    Examples:
        >>> ieee_pow(2.0, 10.0)
        1024.0
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(-8.0, 1.0 / 3.0)
        nan
        >>> ieee_pow(-10.0, 401.0)
        -inf
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -INF
        return INF
    except ValueError:
        if base == 0.0:
            # exponent < 0
            if _is_odd_integer(exponent):
                return math.copysign(INF, base)
            return INF
        return NAN


# =============================================================================
# УНАРНЫЕ ФУНКЦИИ
# =============================================================================


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм: log(0) → -inf, log(x < 0) → NaN, log(inf) → inf.
    """
    if math.isnan(value) or value < 0.0:
        return NAN
    if value == 0.0:
        return -INF
    return math.log(value)


def total_unary(func: Callable[[float], float]) -> Callable[[float], float]:
    """
    Обёртка, делающая функцию math тотальной.

    ValueError (выход из области определения) → NaN
    OverflowError → inf

    Examples:
        >>> safe_sqrt = total_unary(math.sqrt)
        >>> safe_sqrt(-1.0)
        nan
        >>> total_unary(math.sin)(math.inf)
        nan
    """

    def wrapper(value: float) -> float:
        try:
            return func(value)
        except ValueError:
            return NAN
        except OverflowError:
            return INF

    wrapper.__name__ = getattr(func, "__name__", "total_unary")
    wrapper.__doc__ = func.__doc__
    return wrapper
