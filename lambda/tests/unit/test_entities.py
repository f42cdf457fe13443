"""
Testes Unitários - Entidades de secagem (WeatherSample, DryingScore, DryingRecommendation, DryingForecast)
"""
import pytest

from domain.constants import Drying
from domain.entities.drying_forecast import DryingForecast
from domain.entities.drying_recommendation import (
    DisplayColor,
    DryingRecommendation,
    DryingStatus,
    DryingWindow,
)
from domain.entities.drying_score import DryingScore
from domain.entities.weather_sample import WeatherSample
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.daylight_window import DaylightWindow


class TestWeatherSample:

    def test_clamps_percentages(self, make_sample):
        """REGRA: Umidade, nuvens e probabilidade limitadas a [0, 100]"""
        sample = make_sample(humidity=120, cloud_cover=-5, precipitation_probability=130)

        assert sample.humidity == 100.0
        assert sample.cloud_cover == 0.0
        assert sample.precipitation_probability == 100.0

    def test_defaults(self):
        sample = WeatherSample(temperature=18, humidity=55, dew_point=9, wind_speed=12, cloud_cover=40)

        assert sample.hour == 0
        assert sample.time == "00:00"
        assert sample.precipitation == 0.0
        assert sample.precipitation_probability == 0.0
        assert sample.vapour_pressure_deficit is None
        assert sample.has_advanced_metrics is False

    def test_time_label_from_hour(self, make_sample):
        assert make_sample(hour=7).time == "07:00"
        assert make_sample(hour=7, time="07:30").time == "07:30"

    def test_nan_normalized(self, make_sample):
        sample = make_sample(humidity=float('nan'), sunshine_duration=float('nan'))

        assert sample.humidity == 0.0
        assert sample.sunshine_duration is None
        assert sample.has_advanced_metrics is False

    def test_hour_clamped(self, make_sample):
        assert make_sample(hour=30).hour == 23
        assert make_sample(hour=-3).hour == 0

    def test_dew_point_spread(self, make_sample):
        assert make_sample(temperature=20, dew_point=8).dew_point_spread == pytest.approx(12.0)

    def test_immutable(self, make_sample):
        sample = make_sample()

        with pytest.raises(AttributeError):
            sample.humidity = 10

    def test_to_api_response_optional_fields(self, make_sample):
        response = make_sample(sunshine_duration=0.75).to_api_response()

        assert response['dewPoint'] == 8.0
        assert response['sunshineDuration'] == 0.75
        assert 'vapourPressureDeficit' not in response


class TestDryingScore:

    def test_from_total_applies_threshold(self):
        at_threshold = DryingScore.from_total(9, "09:00", {}, 60.0)
        below = DryingScore.from_total(9, "09:00", {}, 59.9)

        assert at_threshold.suitable is True
        assert below.suitable is False

    def test_disqualified(self):
        score = DryingScore.disqualified(9, "09:00", Drying.REASON_RAIN_RISK)

        assert score.is_disqualified
        assert score.total_score == 0.0
        assert dict(score.component_scores) == {name: 0.0 for name in Drying.WEIGHTS}

    def test_component_scores_copied(self):
        components = {'humidity': 50.0}
        score = DryingScore.from_total(9, "09:00", components, 50.0)
        components['humidity'] = 0.0

        assert score.component_scores['humidity'] == 50.0

    def test_weakest_component_empty(self):
        assert DryingScore(hour=1, time="01:00").weakest_component() is None

    def test_to_api_response(self):
        score = DryingScore.disqualified(9, "09:00", Drying.REASON_RAINFALL)
        response = score.to_api_response()

        assert response['totalScore'] == 0.0
        assert response['suitable'] is False
        assert response['disqualificationReason'] == "rainfall detected"
        assert set(response['componentScores']) == set(Drying.WEIGHTS)


class TestDryingRecommendation:

    @pytest.mark.parametrize("status,message,color", [
        (DryingStatus.CONTINUOUS, "Get The Washing Out", DisplayColor.GOOD),
        (DryingStatus.ISOLATED, "Brief Gaps for Outdoor Drying", DisplayColor.CAUTION),
        (DryingStatus.NONE, "Indoor Drying Only", DisplayColor.POOR),
    ])
    def test_fixed_message_and_color(self, status, message, color):
        recommendation = DryingRecommendation.for_status(status)

        assert recommendation.message == message
        assert recommendation.color == color

    def test_to_dict_without_window(self):
        data = DryingRecommendation.for_status(DryingStatus.NONE).to_dict()

        assert data == {
            'status': 'none',
            'message': 'Indoor Drying Only',
            'color': 'poor',
            'timeWindow': 'N/A',
            'duration': 0,
            'averageScore': 0,
            'alternativeWindows': [],
        }

    def test_to_dict_with_window(self):
        window = DryingWindow(
            start_hour=10, end_hour=13, start_time="10:00", end_time="13:00",
            duration=4, average_score=78.25, description="Very good drying conditions"
        )
        data = DryingRecommendation.for_status(DryingStatus.CONTINUOUS, window).to_dict()

        assert data['timeWindow'] == "10:00 - 13:00"
        assert data['duration'] == 4
        assert data['averageScore'] == pytest.approx(78.2, abs=0.05)


class TestDryingForecast:

    def test_to_api_response(self):
        scores = [
            DryingScore.from_total(10, "10:00", {'humidity': 70.0}, 70.0),
            DryingScore.from_total(11, "11:00", {'humidity': 40.0}, 40.0),
        ]
        forecast = DryingForecast(
            coordinates=Coordinates(51.5, -0.12),
            date="2025-06-14",
            location_name="London",
            hourly_scores=scores,
            recommendation=DryingRecommendation.for_status(DryingStatus.ISOLATED),
            limiting_factor="humidity",
            daylight=DaylightWindow(4.75, 21.5)
        )

        response = forecast.to_api_response()

        assert response['location'] == {'name': 'London', 'latitude': 51.5, 'longitude': -0.12}
        assert response['suitableHours'] == 1
        assert response['recommendation']['status'] == 'isolated'
        assert response['limitingFactor'] == 'humidity'
        assert response['daylight'] == {'sunrise': '04:45', 'sunset': '21:30'}
        assert len(response['hourlyScores']) == 2
        assert 'summary' not in response
