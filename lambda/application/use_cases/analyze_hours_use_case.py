"""Use Case: pontua horas fornecidas pelo cliente (sem provider externo)"""
from application.dtos.requests import AnalyzeHoursRequest
from application.dtos.responses import AnalyzeHoursResponse
from domain.services.hour_scorer import HourScorer
from domain.services.pattern_analyzer import PatternAnalyzer


class AnalyzeHoursUseCase:
    """Caminho puro: amostras -> scores -> recomendação"""

    def execute(self, request: AnalyzeHoursRequest) -> AnalyzeHoursResponse:
        scores = [HourScorer.score_hour(sample) for sample in request.samples]
        recommendation = PatternAnalyzer.analyze_pattern(scores, request.start_from_hour)

        relevant_scores = PatternAnalyzer.filter_from_hour(scores, request.start_from_hour)
        return AnalyzeHoursResponse(
            samples=list(request.samples),
            hourly_scores=scores,
            recommendation=recommendation,
            windows=list(recommendation.windows),
            limiting_factor=PatternAnalyzer.find_limiting_factor(relevant_scores)
        )
