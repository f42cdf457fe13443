"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/openmeteo/mappers/openmeteo_data_mapper.py
"""

from domain.services.hour_scorer import HourScorer, score_hour
from domain.services.pattern_analyzer import PatternAnalyzer, analyze_pattern

__all__ = [
    'HourScorer',
    'score_hour',
    'PatternAnalyzer',
    'analyze_pattern'
]
