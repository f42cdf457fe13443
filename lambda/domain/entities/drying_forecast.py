"""
Drying Forecast Entity - Resultado completo do dia para uma localização
"""
from dataclasses import dataclass, field
from typing import List, Optional

from domain.entities.drying_recommendation import DryingRecommendation, DryingWindow
from domain.entities.drying_score import DryingScore
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.daylight_window import DaylightWindow


@dataclass
class DryingForecast:
    """
    Agregado retornado pelo use case

    Combina os scores horários, a recomendação do dia e os dados de contexto
    vindos de colaboradores externos (nome do local e resumo textual).
    """
    coordinates: Coordinates
    date: str  # YYYY-MM-DD
    location_name: str
    hourly_scores: List[DryingScore]
    recommendation: DryingRecommendation
    windows: List[DryingWindow] = field(default_factory=list)
    limiting_factor: Optional[str] = None
    daylight: Optional[DaylightWindow] = None
    summary: Optional[str] = None

    @property
    def suitable_hours(self) -> int:
        return sum(1 for score in self.hourly_scores if score.suitable)

    def to_api_response(self) -> dict:
        """
        Converte para formato de resposta da API

        Returns:
            Dict com dados formatados para JSON
        """
        response = {
            'location': {
                'name': self.location_name,
                'latitude': self.coordinates.latitude,
                'longitude': self.coordinates.longitude,
            },
            'date': self.date,
            'recommendation': self.recommendation.to_dict(),
            'suitableHours': self.suitable_hours,
            'windows': [window.to_dict() for window in self.windows],
            'hourlyScores': [score.to_api_response() for score in self.hourly_scores],
        }

        # Adicionar campos opcionais se disponíveis
        if self.limiting_factor is not None:
            response['limitingFactor'] = self.limiting_factor
        if self.daylight is not None:
            response['daylight'] = self.daylight.to_api_response()
        if self.summary is not None:
            response['summary'] = self.summary

        return response
