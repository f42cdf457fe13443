"""
Hour Scorer - Pontuação de secagem hora a hora
Função pura: uma WeatherSample -> um DryingScore, sem estado entre horas
"""
from typing import Dict, Iterable, List, Optional

from domain.constants import Drying
from domain.entities.drying_score import DryingScore
from domain.entities.weather_sample import WeatherSample
from domain.helpers import drying_curves as curves
from domain.value_objects.daylight_window import DaylightWindow
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class HourScorer:
    """
    Calcula o score de secagem (0-100) de cada hora

    Componentes e pesos (Drying.WEIGHTS):
        - humidity 30%: umidade relativa (refinada por VPD)
        - temperature 20%: temperatura do ar (refinada por bulbo úmido)
        - dew_point_spread 20%: temperatura - ponto de orvalho (refinada por ET0)
        - wind_speed 15%: vento, curva com pico em 25 km/h
        - cloud_cover 15%: nebulosidade (refinada por radiação/insolação)

    Regras de descarte (score 0), nesta ordem:
        1. Chuva registrada (precipitation > 0)
        2. Probabilidade de chuva >= 25%
        3. Dew point spread < 1°C (condensação)
    """

    @staticmethod
    def score_hour(sample: WeatherSample) -> DryingScore:
        """
        Pontua uma hora de dados meteorológicos

        Args:
            sample: Amostra horária

        Returns:
            DryingScore com componentes, total e flag suitable
        """
        reason = HourScorer.disqualification_reason(sample)
        if reason is not None:
            logger.debug("Hora descartada", hour=sample.hour, reason=reason)
            return DryingScore.disqualified(sample.hour, sample.time, reason)

        components = HourScorer.component_scores(sample)
        total = HourScorer.weighted_total(components)

        return DryingScore.from_total(
            hour=sample.hour,
            time=sample.time,
            component_scores={name: round(score, 1) for name, score in components.items()},
            total_score=total
        )

    @staticmethod
    def score_day(
        samples: Iterable[WeatherSample],
        daylight: Optional[DaylightWindow] = None
    ) -> List[DryingScore]:
        """
        Pontua uma sequência de horas mantendo ordem e tamanho

        Horas fora da janela de luz do dia (se informada) recebem score zero.

        Args:
            samples: Amostras horárias em ordem
            daylight: Nascer/pôr do sol (opcional)

        Returns:
            Lista de DryingScore, um por amostra
        """
        scores = []
        for sample in samples:
            if daylight is not None and not daylight.contains_hour(sample.hour):
                scores.append(DryingScore.disqualified(sample.hour, sample.time, Drying.REASON_DARKNESS))
                continue
            scores.append(HourScorer.score_hour(sample))
        return scores

    @staticmethod
    def disqualification_reason(sample: WeatherSample) -> Optional[str]:
        """Retorna o motivo do descarte da hora ou None"""
        if sample.precipitation > 0:
            return Drying.REASON_RAINFALL
        if sample.precipitation_probability >= Drying.RAIN_PROBABILITY_DISQUALIFY:
            return Drying.REASON_RAIN_RISK
        if sample.dew_point_spread < Drying.MIN_DEW_POINT_SPREAD:
            return Drying.REASON_CONDENSATION
        return None

    @staticmethod
    def component_scores(sample: WeatherSample) -> Dict[str, float]:
        """
        Calcula os cinco componentes (0-100 cada)

        Métricas avançadas presentes são combinadas com a curva base via blend().
        """
        humidity = curves.score_humidity(sample.humidity)
        if sample.vapour_pressure_deficit is not None:
            humidity = curves.blend(
                humidity, curves.score_vapour_pressure_deficit(sample.vapour_pressure_deficit)
            )

        temperature = curves.score_temperature(sample.temperature)
        if sample.wet_bulb_temperature is not None:
            temperature = curves.blend(
                temperature,
                curves.score_wet_bulb_depression(sample.temperature, sample.wet_bulb_temperature)
            )

        dew_point_spread = curves.score_dew_point_spread(sample.dew_point_spread)
        if sample.evapotranspiration is not None:
            dew_point_spread = curves.blend(
                dew_point_spread, curves.score_evapotranspiration(sample.evapotranspiration)
            )

        cloud_cover = curves.score_cloud_cover(sample.cloud_cover)
        solar = HourScorer._solar_score(sample)
        if solar is not None:
            cloud_cover = curves.blend(cloud_cover, solar)

        return {
            'humidity': curves.clamp_score(humidity),
            'temperature': curves.clamp_score(temperature),
            'dew_point_spread': curves.clamp_score(dew_point_spread),
            'wind_speed': curves.clamp_score(curves.score_wind_speed(sample.wind_speed)),
            'cloud_cover': curves.clamp_score(cloud_cover),
        }

    @staticmethod
    def weighted_total(components: Dict[str, float]) -> float:
        """Soma ponderada dos componentes, arredondada a 1 casa"""
        total = sum(components[name] * weight for name, weight in Drying.WEIGHTS.items())
        return round(curves.clamp_score(total), 1)

    @staticmethod
    def _solar_score(sample: WeatherSample) -> Optional[float]:
        # Radiação e insolação medem a mesma coisa; com as duas, usa a média
        scores = []
        if sample.shortwave_radiation is not None:
            scores.append(curves.score_shortwave_radiation(sample.shortwave_radiation))
        if sample.sunshine_duration is not None:
            scores.append(curves.score_sunshine_duration(sample.sunshine_duration))
        if not scores:
            return None
        return sum(scores) / len(scores)


def score_hour(sample: WeatherSample) -> DryingScore:
    """Atalho funcional para HourScorer.score_hour"""
    return HourScorer.score_hour(sample)
