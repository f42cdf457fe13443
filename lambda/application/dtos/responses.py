"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from domain.entities.drying_recommendation import DryingRecommendation, DryingWindow
from domain.entities.drying_score import DryingScore
from domain.entities.weather_sample import WeatherSample


@dataclass
class AnalyzeHoursResponse:
    """Response da análise de horas enviadas pelo cliente"""
    samples: List[WeatherSample]
    hourly_scores: List[DryingScore]
    recommendation: DryingRecommendation
    windows: List[DryingWindow] = field(default_factory=list)
    limiting_factor: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        response = {
            'recommendation': self.recommendation.to_dict(),
            'suitableHours': sum(1 for score in self.hourly_scores if score.suitable),
            'windows': [window.to_dict() for window in self.windows],
            'hourlyScores': [score.to_api_response() for score in self.hourly_scores],
            # Entrada normalizada (umidade/nuvens limitadas, hora e rótulo preenchidos)
            'inputHours': [sample.to_api_response() for sample in self.samples],
            'advancedMetricsHours': sum(1 for sample in self.samples if sample.has_advanced_metrics),
        }
        if self.limiting_factor is not None:
            response['limitingFactor'] = self.limiting_factor
        return response
