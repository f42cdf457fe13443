"""
Testes Unitários - PatternAnalyzer
Classificação do dia: continuous / isolated / none
"""
import pytest

from domain.constants import Display, Drying
from domain.entities.drying_recommendation import DisplayColor, DryingStatus
from domain.services.pattern_analyzer import PatternAnalyzer, analyze_pattern


class TestAnalyzePatternClassification:
    """Classificação básica do dia"""

    def test_two_consecutive_suitable_hours_is_continuous(self, make_scores):
        """[45, 65, 70, 55, 75] -> horas 9-10 formam a sequência"""
        result = analyze_pattern(make_scores([45, 65, 70, 55, 75]))

        assert result.status == DryingStatus.CONTINUOUS
        assert result.message == "Get The Washing Out"
        assert result.color == DisplayColor.GOOD

    def test_alternating_suitable_hours_is_isolated(self, make_scores):
        result = analyze_pattern(make_scores([40, 65, 50, 72, 30]))

        assert result.status == DryingStatus.ISOLATED
        assert result.message == "Brief Gaps for Outdoor Drying"
        assert result.color == DisplayColor.CAUTION
        assert result.best_window is None

    def test_no_suitable_hours_is_none(self, make_scores):
        result = analyze_pattern(make_scores([10, 59.9, 45, 30]))

        assert result.status == DryingStatus.NONE
        assert result.message == "Indoor Drying Only"
        assert result.color == DisplayColor.POOR

    def test_single_suitable_hour_is_isolated(self, make_scores):
        """Uma hora adequada não forma sequência de 2"""
        result = analyze_pattern(make_scores([70]))

        assert result.status == DryingStatus.ISOLATED

    def test_empty_is_none(self):
        """REGRA: Lista vazia -> none (vacuamente sem horas boas)"""
        result = analyze_pattern([])

        assert result.status == DryingStatus.NONE
        assert result.best_window is None


class TestAnalyzePatternRules:

    def test_threshold_is_inclusive(self, make_scores):
        """REGRA: Exatamente 60 é adequado"""
        result = analyze_pattern(make_scores([60.0, 60.0]))

        assert result.status == DryingStatus.CONTINUOUS

    def test_continuous_regardless_of_other_runs(self, make_scores):
        """Uma sequência qualificada em qualquer posição basta"""
        result = analyze_pattern(make_scores([70, 10, 80, 10, 10, 10, 65, 66]))

        assert result.status == DryingStatus.CONTINUOUS

    def test_adjacency_by_position_not_hour(self, make_score):
        """REGRA: Horas não contíguas na lista ainda formam sequência"""
        scores = [make_score(hour=9, total=70), make_score(hour=15, total=75)]

        assert analyze_pattern(scores).status == DryingStatus.CONTINUOUS

    def test_malformed_totals_taken_as_given(self, make_score):
        scores = [make_score(hour=9, total=150), make_score(hour=10, total=-5)]

        assert analyze_pattern(scores).status == DryingStatus.ISOLATED

    def test_best_window_for_continuous(self, make_scores):
        result = analyze_pattern(make_scores([65, 70, 40, 80, 85, 90]))

        assert result.best_window is not None
        assert result.best_window.start_time == "11:00"
        assert result.best_window.end_time == "13:00"
        assert result.best_window.duration == 3

    def test_start_from_hour_ignores_earlier_hours(self, make_scores):
        scores = make_scores([70, 75, 40, 65])  # 8h..11h

        assert analyze_pattern(scores).status == DryingStatus.CONTINUOUS
        assert analyze_pattern(scores, start_from_hour=10).status == DryingStatus.ISOLATED
        assert analyze_pattern(scores, start_from_hour=12).status == DryingStatus.NONE

    def test_class_and_function_agree(self, make_scores):
        scores = make_scores([70, 75])

        assert PatternAnalyzer.analyze_pattern(scores) == analyze_pattern(scores)

    def test_status_enum_is_closed(self):
        assert {status.value for status in DryingStatus} == {'continuous', 'isolated', 'none'}

    def test_named_constants(self):
        assert Drying.SUITABLE_SCORE_THRESHOLD == 60.0
        assert Drying.MIN_WINDOW_HOURS == 2


class TestFindDryingWindows:

    def test_windows_sorted_by_average(self, make_scores):
        windows = PatternAnalyzer.find_drying_windows(make_scores([65, 70, 40, 80, 85, 90]))

        assert len(windows) == 2
        assert (windows[0].start_hour, windows[0].end_hour) == (11, 13)
        assert windows[0].average_score == pytest.approx(85.0)
        assert windows[0].description == "Excellent drying conditions"
        assert (windows[1].start_hour, windows[1].end_hour) == (8, 9)
        assert windows[1].average_score == pytest.approx(67.5)
        assert windows[1].description == "Good drying conditions"

    def test_equal_average_prefers_longer_window(self, make_scores):
        """REGRA: Empate na média -> janela mais longa primeiro"""
        windows = PatternAnalyzer.find_drying_windows(make_scores([80, 80, 40, 40, 80, 80, 80, 40]))

        assert [(w.start_time, w.duration) for w in windows] == [("12:00", 3), ("08:00", 2)]

    def test_best_window_on_tie_is_longer(self, make_scores):
        result = analyze_pattern(make_scores([80, 80, 40, 40, 80, 80, 80, 40]))

        assert result.best_window.start_time == "12:00"
        assert result.best_window.duration == 3
        assert [w.start_time for w in result.alternative_windows] == ["08:00"]

    def test_alternatives_capped(self, make_scores):
        """REGRA: No máximo Drying.MAX_ALTERNATIVE_WINDOWS alternativas"""
        totals = [90, 90, 10, 80, 80, 10, 70, 70, 10, 65, 65]

        result = analyze_pattern(make_scores(totals))

        assert result.best_window.start_time == "08:00"
        assert [w.start_time for w in result.alternative_windows] == ["11:00", "14:00"]
        assert len(result.windows) == 3
        assert len(PatternAnalyzer.find_drying_windows(make_scores(totals))) == 4

    def test_non_continuous_has_no_windows(self, make_scores):
        result = analyze_pattern(make_scores([70, 40, 70]))

        assert result.windows == ()
        assert result.alternative_windows == ()

    def test_single_hours_are_not_windows(self, make_scores):
        assert PatternAnalyzer.find_drying_windows(make_scores([70, 40, 70])) == []

    def test_window_open_at_end(self, make_scores):
        windows = PatternAnalyzer.find_drying_windows(make_scores([40, 61, 62]))

        assert len(windows) == 1
        assert windows[0].time_window == "09:00 - 10:00"

    def test_empty(self):
        assert PatternAnalyzer.find_drying_windows([]) == []

    @pytest.mark.parametrize("average,description", [
        (80.0, "Excellent drying conditions"),
        (79.9, "Very good drying conditions"),
        (70.0, "Very good drying conditions"),
        (60.0, "Good drying conditions"),
        (55.0, "Decent drying conditions"),
        (54.9, Display.WINDOW_DESCRIPTION_DEFAULT),
    ])
    def test_describe_window(self, average, description):
        assert PatternAnalyzer.describe_window(average) == description


class TestFindLimitingFactor:

    def test_disqualification_reason_wins(self, make_score):
        scores = [make_score(hour=9, total=70), make_score(hour=10, reason=Drying.REASON_RAINFALL)]

        assert PatternAnalyzer.find_limiting_factor(scores) == "rainfall detected"

    def test_weakest_component(self, make_score):
        components = {
            'humidity': 10.0,
            'temperature': 50.0,
            'dew_point_spread': 60.0,
            'wind_speed': 40.0,
            'cloud_cover': 30.0,
        }
        scores = [make_score(hour=9, total=35, components=components)]

        assert PatternAnalyzer.find_limiting_factor(scores) == 'humidity'

    def test_all_suitable(self, make_scores):
        assert PatternAnalyzer.find_limiting_factor(make_scores([70, 80])) is None

    def test_empty(self):
        assert PatternAnalyzer.find_limiting_factor([]) is None
