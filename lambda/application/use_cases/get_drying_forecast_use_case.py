"""Async Use Case: Previsão de secagem de roupa para uma localização e um dia"""
import asyncio
from datetime import date
from typing import List, Optional

from ddtrace import tracer

from application.ports.output.geo_provider_port import IReverseGeocoder
from application.ports.output.summary_provider_port import ISummaryProvider
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import Display
from domain.entities.drying_forecast import DryingForecast
from domain.entities.drying_recommendation import DryingRecommendation
from domain.entities.drying_score import DryingScore
from domain.exceptions import WeatherDataNotFoundException
from domain.services.hour_scorer import HourScorer
from domain.services.pattern_analyzer import PatternAnalyzer
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetDryingForecastUseCase:
    """
    Async use case: pontua o dia e classifica o padrão de secagem

    Fluxo:
    - Open-Meteo: amostras horárias + nascer/pôr do sol (chamada crítica)
    - HourScorer + PatternAnalyzer (domínio, síncrono)
    - Nome do lugar e resumo textual em paralelo, ambos com fallback
    """

    def __init__(
        self,
        weather_provider: IWeatherProvider,
        geocoder: Optional[IReverseGeocoder] = None,
        summary_provider: Optional[ISummaryProvider] = None
    ):
        self.weather_provider = weather_provider
        self.geocoder = geocoder
        self.summary_provider = summary_provider

    @tracer.wrap(resource="use_case.get_drying_forecast")
    async def execute(
        self,
        latitude: float,
        longitude: float,
        target_date: date,
        start_from_hour: Optional[int] = None
    ) -> DryingForecast:
        """
        Execute use case

        Args:
            latitude: Latitude em graus
            longitude: Longitude em graus
            target_date: Dia da previsão
            start_from_hour: Ignora horas anteriores na classificação (opcional)

        Returns:
            DryingForecast com scores, recomendação, janelas e contexto

        Raises:
            InvalidCoordinatesException: Coordenadas fora da faixa
            WeatherDataNotFoundException: Provider sem horas para o dia
            WeatherProviderException: Falha do provider
        """
        coordinates = Coordinates(latitude=latitude, longitude=longitude)

        samples, daylight = await self.weather_provider.get_day_forecast(coordinates, target_date)
        if not samples:
            raise WeatherDataNotFoundException(
                "No weather data available for the requested day",
                details={"coordinates": str(coordinates), "date": target_date.isoformat()}
            )

        scores = HourScorer.score_day(samples, daylight)
        recommendation = PatternAnalyzer.analyze_pattern(scores, start_from_hour)

        relevant_scores = PatternAnalyzer.filter_from_hour(scores, start_from_hour)
        windows = list(recommendation.windows)
        limiting_factor = PatternAnalyzer.find_limiting_factor(relevant_scores)

        logger.info(
            "Drying forecast scored",
            date=target_date.isoformat(),
            hours=len(scores),
            status=recommendation.status.value,
            windows=len(windows)
        )

        # Colaboradores externos em paralelo (falhas não derrubam a resposta)
        location_name, summary = await asyncio.gather(
            self._resolve_location_name(coordinates),
            self._resolve_summary(relevant_scores, recommendation)
        )

        return DryingForecast(
            coordinates=coordinates,
            date=target_date.isoformat(),
            location_name=location_name,
            hourly_scores=scores,
            recommendation=recommendation,
            windows=windows,
            limiting_factor=limiting_factor,
            daylight=daylight,
            summary=summary
        )

    async def _resolve_location_name(self, coordinates: Coordinates) -> str:
        if self.geocoder is None:
            return Display.UNKNOWN_LOCATION
        try:
            return await self.geocoder.get_place_name(coordinates)
        except Exception as e:
            logger.warning(
                "Reverse geocoding failed, using fallback",
                provider=self.geocoder.provider_name,
                error=str(e)
            )
            return Display.UNKNOWN_LOCATION

    async def _resolve_summary(
        self,
        scores: List[DryingScore],
        recommendation: DryingRecommendation
    ) -> Optional[str]:
        if self.summary_provider is None:
            return None
        try:
            return await self.summary_provider.summarize(self.build_digest(scores, recommendation))
        except Exception as e:
            logger.warning("Summary generation failed, using fallback", error=str(e))
            return Display.SUMMARY_FALLBACK

    @staticmethod
    def build_digest(scores: List[DryingScore], recommendation: DryingRecommendation) -> str:
        """
        Texto compacto para o serviço de resumo

        Uma entrada por hora ("14:00 72.5 suitable") + recomendação final.
        """
        hours = " | ".join(
            f"{score.time} {score.total_score:.1f} {'suitable' if score.suitable else 'unsuitable'}"
            for score in scores
        )
        digest = f"{hours}\nRecommendation: {recommendation.message}"
        if recommendation.best_window is not None:
            digest += f" ({recommendation.best_window.time_window})"
        return digest
