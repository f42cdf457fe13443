"""
Pattern Analyzer - Classificação do padrão diário de secagem
Sequência ordenada de DryingScore -> DryingRecommendation (continuous/isolated/none)
"""
from typing import List, Optional, Sequence

from domain.constants import Display, Drying
from domain.entities.drying_recommendation import (
    DryingRecommendation,
    DryingStatus,
    DryingWindow,
)
from domain.entities.drying_score import DryingScore


class PatternAnalyzer:
    """
    Analisa o padrão temporal dos scores horários

    Regras (a ordem importa):
        1. Alguma sequência de 2+ horas adequadas seguidas -> CONTINUOUS
        2. Alguma hora adequada isolada -> ISOLATED
        3. Nenhuma hora adequada (inclusive lista vazia) -> NONE

    Adjacência é pela posição na lista, não pelo valor da hora.
    """

    @staticmethod
    def analyze_pattern(
        scores: Sequence[DryingScore],
        start_from_hour: Optional[int] = None
    ) -> DryingRecommendation:
        """
        Classifica o dia

        Args:
            scores: Scores horários em ordem
            start_from_hour: Ignora horas anteriores (ex: restante do dia de hoje)

        Returns:
            DryingRecommendation com status, mensagem e cor fixos
        """
        scores = PatternAnalyzer.filter_from_hour(scores, start_from_hour)

        if PatternAnalyzer.has_continuous_run(scores):
            windows = PatternAnalyzer.find_drying_windows(scores)
            return DryingRecommendation.for_status(
                DryingStatus.CONTINUOUS,
                best_window=windows[0],
                alternative_windows=tuple(windows[1:1 + Drying.MAX_ALTERNATIVE_WINDOWS])
            )

        if any(score.suitable for score in scores):
            return DryingRecommendation.for_status(DryingStatus.ISOLATED)

        return DryingRecommendation.for_status(DryingStatus.NONE)

    @staticmethod
    def has_continuous_run(scores: Sequence[DryingScore]) -> bool:
        """True na primeira sequência com Drying.MIN_WINDOW_HOURS horas adequadas"""
        run_length = 0
        for score in scores:
            run_length = run_length + 1 if score.suitable else 0
            if run_length >= Drying.MIN_WINDOW_HOURS:
                return True
        return False

    @staticmethod
    def find_drying_windows(scores: Sequence[DryingScore]) -> List[DryingWindow]:
        """
        Encontra todas as sequências máximas de horas adequadas (2+ horas)

        Returns:
            Todas as janelas, melhor primeiro: maior média de score e, no empate,
            a mais longa (ordenação estável)
        """
        windows: List[DryingWindow] = []
        current: List[DryingScore] = []

        for score in scores:
            if score.suitable:
                current.append(score)
                continue
            if len(current) >= Drying.MIN_WINDOW_HOURS:
                windows.append(PatternAnalyzer._create_window(current))
            current = []

        # Janela aberta no fim da lista
        if len(current) >= Drying.MIN_WINDOW_HOURS:
            windows.append(PatternAnalyzer._create_window(current))

        return sorted(
            windows,
            key=lambda window: (window.average_score, window.duration),
            reverse=True
        )

    @staticmethod
    def find_limiting_factor(scores: Sequence[DryingScore]) -> Optional[str]:
        """
        Fator que impediu a primeira hora inadequada

        Returns:
            Motivo do descarte, nome do componente mais fraco, ou None
        """
        for score in scores:
            if score.suitable:
                continue
            if score.is_disqualified:
                return score.disqualification_reason
            return score.weakest_component()
        return None

    @staticmethod
    def describe_window(average_score: float) -> str:
        for minimum, description in Display.WINDOW_DESCRIPTIONS:
            if average_score >= minimum:
                return description
        return Display.WINDOW_DESCRIPTION_DEFAULT

    @staticmethod
    def _create_window(run: List[DryingScore]) -> DryingWindow:
        average = sum(score.total_score for score in run) / len(run)
        return DryingWindow(
            start_hour=run[0].hour,
            end_hour=run[-1].hour,
            start_time=run[0].time,
            end_time=run[-1].time,
            duration=len(run),
            average_score=round(average, 1),
            description=PatternAnalyzer.describe_window(average)
        )

    @staticmethod
    def filter_from_hour(
        scores: Sequence[DryingScore],
        start_from_hour: Optional[int]
    ) -> Sequence[DryingScore]:
        if start_from_hour is None:
            return scores
        return [score for score in scores if score.hour >= start_from_hour]


def analyze_pattern(
    scores: Sequence[DryingScore],
    start_from_hour: Optional[int] = None
) -> DryingRecommendation:
    """Atalho funcional para PatternAnalyzer.analyze_pattern"""
    return PatternAnalyzer.analyze_pattern(scores, start_from_hour)
