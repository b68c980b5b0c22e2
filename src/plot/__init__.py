"""Plot — сэмплирование скомпилированных выражений для отрисовки."""

from .sampler import MAX_SAMPLES, SampledCurve, SamplingConfig, sample_curve

__all__ = [
    "MAX_SAMPLES",
    "SamplingConfig",
    "SampledCurve",
    "sample_curve",
]
