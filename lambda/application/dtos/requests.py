"""Request DTOs - Contratos de entrada para use cases"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Tuple

from domain.constants import App
from domain.entities.weather_sample import WeatherSample
from domain.exceptions import InvalidRequestException
from shared.utils.validators import GenericValidator, HourValidator

# campo JSON -> campo de WeatherSample
REQUIRED_SAMPLE_FIELDS = {
    'temperature': 'temperature',
    'humidity': 'humidity',
    'dewPoint': 'dew_point',
    'windSpeed': 'wind_speed',
    'cloudCover': 'cloud_cover',
}
OPTIONAL_SAMPLE_FIELDS = {
    'precipitation': 'precipitation',
    'precipitationProbability': 'precipitation_probability',
    'vapourPressureDeficit': 'vapour_pressure_deficit',
    'wetBulbTemperature': 'wet_bulb_temperature',
    'shortwaveRadiation': 'shortwave_radiation',
    'sunshineDuration': 'sunshine_duration',
    'evapotranspiration': 'evapotranspiration',
}


@dataclass(frozen=True)
class GetDryingForecastRequest:
    """Request para previsão de secagem de uma localização"""
    latitude: float
    longitude: float
    target_date: date
    start_from_hour: Optional[int] = None


@dataclass(frozen=True)
class AnalyzeHoursRequest:
    """Request para pontuar horas enviadas pelo cliente (sem chamada externa)"""
    samples: Tuple[WeatherSample, ...]
    start_from_hour: Optional[int] = None

    @staticmethod
    def from_body(body: Any) -> 'AnalyzeHoursRequest':
        """
        Constrói request a partir do body JSON

        Formato:
            {"hours": [{"temperature": 20, "humidity": 45, "dewPoint": 8,
                        "windSpeed": 15, "cloudCover": 30, ...}],
             "startFromHour": 9}

        Raises:
            InvalidRequestException: Body ausente ou hora malformada
        """
        if not isinstance(body, dict):
            raise InvalidRequestException("Request body must be a JSON object")

        hours = body.get('hours')
        if not isinstance(hours, list):
            raise InvalidRequestException(
                "Field 'hours' must be a list",
                details={'hours': type(hours).__name__}
            )

        samples = tuple(
            AnalyzeHoursRequest._parse_sample(item, index)
            for index, item in enumerate(hours)
        )

        start_from_hour = body.get('startFromHour')
        if start_from_hour is not None:
            start_from_hour = HourValidator.validate(start_from_hour, 'startFromHour')

        return AnalyzeHoursRequest(samples=samples, start_from_hour=start_from_hour)

    @staticmethod
    def _parse_sample(item: Any, index: int) -> WeatherSample:
        if not isinstance(item, dict):
            raise InvalidRequestException(
                "Each hour must be a JSON object",
                details={'index': index}
            )

        values: Dict[str, Any] = {}
        for json_key, field_name in REQUIRED_SAMPLE_FIELDS.items():
            values[field_name] = GenericValidator.validate_float(item.get(json_key), f"hours[{index}].{json_key}")

        for json_key, field_name in OPTIONAL_SAMPLE_FIELDS.items():
            if item.get(json_key) is not None:
                values[field_name] = GenericValidator.validate_float(item[json_key], f"hours[{index}].{json_key}")

        # Sem hora explícita, a posição na lista vale como hora
        hour = item.get('hour')
        values['hour'] = (
            HourValidator.validate(hour, f"hours[{index}].hour")
            if hour is not None else index % App.HOURS_PER_DAY
        )
        if item.get('time'):
            values['time'] = str(item['time'])

        return WeatherSample(**values)

