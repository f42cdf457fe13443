"""
Drying Score Entity - Score de secagem de uma hora
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from domain.constants import Drying


@dataclass(frozen=True)
class DryingScore:
    """
    Score de secagem de uma hora (produzido pelo HourScorer)

    component_scores: fator -> 0-100 (somente leitura)
    total_score: combinação ponderada dos componentes (0-100)
    suitable: total_score >= Drying.SUITABLE_SCORE_THRESHOLD
    """
    hour: int
    time: str
    component_scores: Mapping[str, float] = field(default_factory=dict)
    total_score: float = 0.0
    suitable: bool = False
    disqualification_reason: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self, 'component_scores', MappingProxyType(dict(self.component_scores))
        )

    @classmethod
    def from_total(
        cls,
        hour: int,
        time: str,
        component_scores: Mapping[str, float],
        total_score: float
    ) -> 'DryingScore':
        """
        Factory que aplica o threshold global de adequação

        Args:
            hour: Índice da hora (0-23)
            time: Rótulo da hora
            component_scores: Scores por componente
            total_score: Score total já ponderado

        Returns:
            DryingScore com suitable calculado
        """
        return cls(
            hour=hour,
            time=time,
            component_scores=component_scores,
            total_score=total_score,
            suitable=total_score >= Drying.SUITABLE_SCORE_THRESHOLD
        )

    @classmethod
    def disqualified(cls, hour: int, time: str, reason: str) -> 'DryingScore':
        """Hora descartada: todos os componentes zerados"""
        return cls(
            hour=hour,
            time=time,
            component_scores={name: 0.0 for name in Drying.WEIGHTS},
            total_score=0.0,
            suitable=False,
            disqualification_reason=reason
        )

    @property
    def is_disqualified(self) -> bool:
        return self.disqualification_reason is not None

    def weakest_component(self) -> Optional[str]:
        """Nome do componente com menor score (empate: ordem dos pesos)"""
        if not self.component_scores:
            return None
        return min(self.component_scores, key=lambda name: self.component_scores[name])

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        response = {
            'hour': self.hour,
            'time': self.time,
            'totalScore': round(self.total_score, 1),
            'suitable': self.suitable,
            'componentScores': {
                name: round(score, 1) for name, score in self.component_scores.items()
            },
        }
        if self.disqualification_reason is not None:
            response['disqualificationReason'] = self.disqualification_reason
        return response
