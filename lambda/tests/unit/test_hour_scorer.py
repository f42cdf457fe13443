"""
Testes Unitários - HourScorer
Contrato: uma amostra -> um DryingScore, puro e determinístico
"""
import pytest

from domain.constants import Drying
from domain.entities.drying_recommendation import DryingStatus
from domain.entities.drying_score import DryingScore
from domain.services.hour_scorer import HourScorer, score_hour
from domain.services.pattern_analyzer import analyze_pattern
from domain.value_objects.daylight_window import DaylightWindow


class TestWeights:

    def test_weights_sum_to_one(self):
        """REGRA: Pesos fixos somam 100%"""
        assert sum(Drying.WEIGHTS.values()) == pytest.approx(1.0)

    def test_weights_distribution(self):
        assert Drying.WEIGHTS == {
            'humidity': 0.30,
            'temperature': 0.20,
            'dew_point_spread': 0.20,
            'wind_speed': 0.15,
            'cloud_cover': 0.15,
        }


class TestScoreHour:

    def test_ideal_hour(self, make_sample):
        """Hora ideal: 20°C, 40%, spread 12°C, 20 km/h, 10% nuvens"""
        result = score_hour(make_sample())

        assert result.component_scores == {
            'humidity': 90.0,
            'temperature': 90.0,
            'dew_point_spread': 100.0,
            'wind_speed': 90.0,
            'cloud_cover': 90.0,
        }
        assert result.total_score == pytest.approx(92.0)
        assert result.suitable is True
        assert result.disqualification_reason is None

    def test_poor_hour(self, make_sample):
        """Hora ruim: fria, úmida, sem vento e encoberta"""
        result = score_hour(make_sample(
            temperature=8, humidity=85, dew_point=5, wind_speed=2, cloud_cover=100
        ))

        assert result.component_scores['humidity'] == pytest.approx(10.0)
        assert result.component_scores['temperature'] == pytest.approx(45.0)
        assert result.component_scores['dew_point_spread'] == pytest.approx(50.0)
        assert result.component_scores['wind_speed'] == pytest.approx(20.0)
        assert result.component_scores['cloud_cover'] == pytest.approx(0.0)
        assert result.total_score == pytest.approx(25.0)
        assert result.suitable is False
        assert result.weakest_component() == 'cloud_cover'

    def test_hour_and_time_propagated(self, make_sample):
        result = score_hour(make_sample(hour=14))

        assert result.hour == 14
        assert result.time == "14:00"

    def test_deterministic(self, make_sample):
        """REGRA: Mesma amostra -> mesmo resultado"""
        sample = make_sample(temperature=17.3, humidity=63.1, wind_speed=11.7)

        assert score_hour(sample) == score_hour(sample)

    def test_order_independent(self, make_sample):
        """REGRA: Score de uma hora não depende das outras"""
        samples = [make_sample(hour=h, humidity=40 + h * 2) for h in range(8, 14)]

        forward = [score_hour(s) for s in samples]
        backward = [score_hour(s) for s in reversed(samples)]

        assert forward == list(reversed(backward))

    @pytest.mark.parametrize("kwargs", [
        dict(temperature=-40, humidity=-10, dew_point=-60, wind_speed=-5, cloud_cover=-30),
        dict(temperature=55, humidity=150, dew_point=10, wind_speed=200, cloud_cover=400),
        dict(temperature=20, humidity=0, dew_point=-20, wind_speed=0, cloud_cover=0),
        dict(temperature=20, humidity=40, dew_point=8, wind_speed=20, cloud_cover=10,
             vapour_pressure_deficit=50, wet_bulb_temperature=-50, shortwave_radiation=5000,
             sunshine_duration=3, evapotranspiration=99),
    ])
    def test_scores_always_in_range(self, make_sample, kwargs):
        """REGRA: Componentes e total sempre em [0, 100], suitable == total >= 60"""
        result = score_hour(make_sample(**kwargs))

        for value in result.component_scores.values():
            assert 0.0 <= value <= 100.0
        assert 0.0 <= result.total_score <= 100.0
        assert result.suitable == (result.total_score >= Drying.SUITABLE_SCORE_THRESHOLD)

    def test_component_scores_read_only(self, make_sample):
        result = score_hour(make_sample())

        with pytest.raises(TypeError):
            result.component_scores['humidity'] = 0.0


class TestDisqualification:

    def test_rainfall(self, make_sample):
        """REGRA: Qualquer precipitação descarta a hora"""
        result = score_hour(make_sample(precipitation=0.1))

        assert result.total_score == 0.0
        assert result.suitable is False
        assert result.disqualification_reason == Drying.REASON_RAINFALL
        assert set(result.component_scores) == set(Drying.WEIGHTS)
        assert all(value == 0.0 for value in result.component_scores.values())

    def test_rain_probability_at_threshold(self, make_sample):
        """REGRA: Probabilidade >= 25% descarta a hora"""
        result = score_hour(make_sample(precipitation_probability=25))

        assert result.disqualification_reason == Drying.REASON_RAIN_RISK
        assert result.total_score == 0.0

    def test_rain_probability_below_threshold(self, make_sample):
        result = score_hour(make_sample(precipitation_probability=24))

        assert result.disqualification_reason is None
        assert result.suitable is True

    def test_condensation_risk(self, make_sample):
        """REGRA: Spread < 1°C descarta a hora"""
        result = score_hour(make_sample(temperature=10, dew_point=9.5))

        assert result.disqualification_reason == Drying.REASON_CONDENSATION

    def test_rainfall_checked_first(self, make_sample):
        result = score_hour(make_sample(
            precipitation=2.0, precipitation_probability=90, temperature=10, dew_point=10
        ))

        assert result.disqualification_reason == Drying.REASON_RAINFALL

    def test_negative_precipitation_clamped(self, make_sample):
        result = score_hour(make_sample(precipitation=-1.0))

        assert result.disqualification_reason is None

    def test_nan_temperature_never_suitable(self, make_sample):
        """NaN vira 0°C: spread negativo -> risco de condensação"""
        result = score_hour(make_sample(temperature=float('nan')))

        assert result.suitable is False
        assert result.disqualification_reason == Drying.REASON_CONDENSATION

    def test_nan_advanced_metric_ignored(self, make_sample):
        result = score_hour(make_sample(vapour_pressure_deficit=float('nan')))

        assert result.total_score == pytest.approx(92.0)


class TestAdvancedMetrics:

    def test_vpd_refines_humidity(self, make_sample):
        """VPD 0.5 kPa (score 10) combinado com umidade 40% (score 90)"""
        result = score_hour(make_sample(vapour_pressure_deficit=0.5))

        assert result.component_scores['humidity'] == pytest.approx(50.0)
        assert result.total_score == pytest.approx(80.0)

    def test_wet_bulb_refines_temperature(self, make_sample):
        result = score_hour(make_sample(wet_bulb_temperature=10.0))

        assert result.component_scores['temperature'] == pytest.approx(95.0)

    def test_evapotranspiration_refines_spread(self, make_sample):
        result = score_hour(make_sample(evapotranspiration=2.0))

        assert result.component_scores['dew_point_spread'] == pytest.approx(75.0)

    def test_radiation_and_sunshine_averaged(self, make_sample):
        """Radiação 0 + insolação 1h -> solar 50, nuvens 90 -> 70"""
        result = score_hour(make_sample(shortwave_radiation=0.0, sunshine_duration=1.0))

        assert result.component_scores['cloud_cover'] == pytest.approx(70.0)

    def test_radiation_alone(self, make_sample):
        result = score_hour(make_sample(shortwave_radiation=150.0))

        assert result.component_scores['cloud_cover'] == pytest.approx(70.0)

    def test_missing_metrics_use_base_curves(self, make_sample):
        """REGRA: Métrica ausente nunca gera erro nem altera o componente"""
        sample = make_sample()

        assert sample.has_advanced_metrics is False
        assert score_hour(sample).total_score == pytest.approx(92.0)


class TestScoreDay:

    def test_preserves_order_and_length(self, make_sample):
        samples = [make_sample(hour=h) for h in (9, 10, 11)]

        result = HourScorer.score_day(samples)

        assert [s.hour for s in result] == [9, 10, 11]
        assert all(isinstance(s, DryingScore) for s in result)

    def test_daylight_filter(self, make_sample):
        """REGRA: Horas fora de [nascer, pôr] recebem zero"""
        daylight = DaylightWindow(sunrise_decimal=6.5, sunset_decimal=20.25)
        samples = [make_sample(hour=h) for h in (6, 7, 20, 21)]

        result = HourScorer.score_day(samples, daylight)

        assert [s.disqualification_reason for s in result] == [
            Drying.REASON_DARKNESS, None, None, Drying.REASON_DARKNESS
        ]
        assert [s.suitable for s in result] == [False, True, True, False]

    def test_short_daylight_leaves_single_hour(self, make_sample):
        """Nascer 07:30 e pôr 08:00: só a hora 8 é diurna, sem janela contínua"""
        daylight = DaylightWindow(sunrise_decimal=7.5, sunset_decimal=8.0)
        samples = [make_sample(hour=h) for h in range(24)]

        result = HourScorer.score_day(samples, daylight)

        assert [s.hour for s in result if s.suitable] == [8]
        assert analyze_pattern(result).status == DryingStatus.ISOLATED

    def test_no_daylight_scores_every_hour(self, make_sample):
        result = HourScorer.score_day([make_sample(hour=2)])

        assert result[0].suitable is True
