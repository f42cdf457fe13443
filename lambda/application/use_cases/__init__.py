"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .get_drying_forecast_use_case import GetDryingForecastUseCase
from .analyze_hours_use_case import AnalyzeHoursUseCase

__all__ = [
    'GetDryingForecastUseCase',
    'AnalyzeHoursUseCase'
]
