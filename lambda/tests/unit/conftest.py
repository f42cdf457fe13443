"""
Configurações e fixtures compartilhadas para testes unitários
"""
import pytest

from domain.constants import Drying
from domain.entities.drying_score import DryingScore
from domain.entities.weather_sample import WeatherSample


@pytest.fixture
def make_sample():
    """
    Factory fixture para criar WeatherSample com valores padrão (hora ideal)

    Padrão: 20°C, 40% umidade, orvalho 8°C, vento 20 km/h, 10% nuvens -> total 92

    Usage:
        def test_something(make_sample):
            sample = make_sample(humidity=85)
    """
    def _make(
        temperature: float = 20.0,
        humidity: float = 40.0,
        dew_point: float = 8.0,
        wind_speed: float = 20.0,
        cloud_cover: float = 10.0,
        hour: int = 12,
        **optional
    ) -> WeatherSample:
        return WeatherSample(
            temperature=temperature,
            humidity=humidity,
            dew_point=dew_point,
            wind_speed=wind_speed,
            cloud_cover=cloud_cover,
            hour=hour,
            **optional
        )

    return _make


@pytest.fixture
def make_score():
    """
    Factory fixture para criar DryingScore a partir do total

    Usage:
        scores = [make_score(hour=9, total=65), make_score(hour=10, total=40)]
    """
    def _make(
        hour: int = 12,
        total: float = 70.0,
        components: dict = None,
        reason: str = None
    ) -> DryingScore:
        if reason is not None:
            return DryingScore.disqualified(hour, f"{hour:02d}:00", reason)
        return DryingScore.from_total(
            hour=hour,
            time=f"{hour:02d}:00",
            component_scores=components or {name: total for name in Drying.WEIGHTS},
            total_score=total
        )

    return _make


@pytest.fixture
def make_scores(make_score):
    """Sequência de scores a partir de uma lista de totais (horas a partir de 8h)"""
    def _make(totals, first_hour: int = 8):
        return [make_score(hour=first_hour + i, total=total) for i, total in enumerate(totals)]

    return _make
