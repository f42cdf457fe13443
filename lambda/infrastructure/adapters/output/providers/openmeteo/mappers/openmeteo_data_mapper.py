"""
OpenMeteo Data Mapper - Transforma dados da API Open-Meteo para entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)

Esta é a borda onde valores ausentes viram defaults documentados:
o HourScorer nunca precisa lidar com "dado faltando".
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from domain.constants import App
from domain.entities.weather_sample import WeatherSample
from domain.value_objects.daylight_window import DaylightWindow
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

# Defaults para campos opcionais básicos
DEFAULT_PRECIPITATION = 0.0  # mm
DEFAULT_PRECIPITATION_PROBABILITY = 0.0  # %

# Conversões de unidade
SECONDS_PER_HOUR = 3600.0


def _value_at(values: List[Any], index: int) -> Optional[Any]:
    """Retorna values[index] ou None (arrays do Open-Meteo podem vir curtos)"""
    return values[index] if index < len(values) else None


def _optional_float(value: Optional[Any]) -> Optional[float]:
    return float(value) if value is not None else None


class OpenMeteoDataMapper:
    """
    Mapper para transformar respostas da API Open-Meteo em entities de domínio

    Responsabilidade: Traduzir formato Open-Meteo → Domain entities
    Localização: Infrastructure (conhece detalhes da API externa)
    """

    @staticmethod
    def map_hourly_response_to_samples(data: Dict[str, Any]) -> List[WeatherSample]:
        """
        Mapeia resposta /forecast (hourly) da API Open-Meteo para WeatherSample

        Unidades:
            - sunshine_duration: segundos → horas
            - et0_fao_evapotranspiration: mm/hora → taxa em mm/dia (×24)

        Args:
            data: Resposta raw da API Open-Meteo (hourly endpoint)

        Returns:
            Lista de WeatherSample em ordem de hora (horas incompletas são puladas)
        """
        hourly = data.get('hourly', {})

        # Extrair arrays
        times = hourly.get('time', [])
        temps = hourly.get('temperature_2m', [])
        humidity = hourly.get('relative_humidity_2m', [])
        dew_points = hourly.get('dew_point_2m', [])
        wind_speeds = hourly.get('wind_speed_10m', [])
        clouds = hourly.get('cloud_cover', [])
        precip = hourly.get('precipitation', [])
        precip_prob = hourly.get('precipitation_probability', [])
        vpd = hourly.get('vapour_pressure_deficit', [])
        wet_bulb = hourly.get('wet_bulb_temperature_2m', [])
        radiation = hourly.get('shortwave_radiation', [])
        sunshine = hourly.get('sunshine_duration', [])
        et0 = hourly.get('et0_fao_evapotranspiration', [])

        samples = []

        for i, timestamp in enumerate(times):
            core = (
                _value_at(temps, i),
                _value_at(humidity, i),
                _value_at(dew_points, i),
                _value_at(wind_speeds, i),
                _value_at(clouds, i),
            )
            if any(value is None for value in core):
                logger.warning("Hora com dados essenciais ausentes, pulando", timestamp=timestamp)
                continue

            try:
                forecast_dt = datetime.fromisoformat(timestamp)
            except (TypeError, ValueError):
                logger.warning("Timestamp inválido, pulando", timestamp=timestamp)
                continue

            sunshine_seconds = _value_at(sunshine, i)
            et0_hourly = _value_at(et0, i)
            precipitation = _value_at(precip, i)
            probability = _value_at(precip_prob, i)

            samples.append(WeatherSample(
                temperature=float(core[0]),
                humidity=float(core[1]),
                dew_point=float(core[2]),
                wind_speed=float(core[3]),
                cloud_cover=float(core[4]),
                hour=forecast_dt.hour,
                time=forecast_dt.strftime('%H:%M'),
                precipitation=float(precipitation) if precipitation is not None else DEFAULT_PRECIPITATION,
                precipitation_probability=(
                    float(probability) if probability is not None else DEFAULT_PRECIPITATION_PROBABILITY
                ),
                vapour_pressure_deficit=_optional_float(_value_at(vpd, i)),
                wet_bulb_temperature=_optional_float(_value_at(wet_bulb, i)),
                shortwave_radiation=_optional_float(_value_at(radiation, i)),
                sunshine_duration=(
                    float(sunshine_seconds) / SECONDS_PER_HOUR if sunshine_seconds is not None else None
                ),
                evapotranspiration=(
                    float(et0_hourly) * App.HOURS_PER_DAY if et0_hourly is not None else None
                ),
            ))

        return samples

    @staticmethod
    def map_daylight(data: Dict[str, Any]) -> Optional[DaylightWindow]:
        """
        Extrai nascer/pôr do sol do primeiro dia da resposta (daily)

        Returns:
            DaylightWindow ou None se ausente/inválido
        """
        daily = data.get('daily', {})
        sunrise = _value_at(daily.get('sunrise', []), 0)
        sunset = _value_at(daily.get('sunset', []), 0)

        if not sunrise or not sunset:
            return None

        try:
            return DaylightWindow.from_iso(sunrise, sunset)
        except (TypeError, ValueError) as e:
            logger.warning("Falha ao processar nascer/pôr do sol", error=str(e))
            return None
