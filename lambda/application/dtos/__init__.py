"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.requests import AnalyzeHoursRequest, GetDryingForecastRequest
from application.dtos.responses import AnalyzeHoursResponse

__all__ = [
    'AnalyzeHoursRequest',
    'GetDryingForecastRequest',
    'AnalyzeHoursResponse'
]
