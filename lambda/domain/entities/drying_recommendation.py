"""
Drying Recommendation - Recomendação diária (status fechado com 3 casos)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from domain.constants import Display


class DisplayColor(Enum):
    """Tokens de cor para a camada de exibição"""
    GOOD = "good"  # Verde
    CAUTION = "caution"  # Âmbar
    POOR = "poor"  # Vermelho


class DryingStatus(Enum):
    """
    Status da recomendação do dia

    Cada membro carrega sua mensagem fixa e seu token de cor.
    """
    CONTINUOUS = "continuous"  # Janela de 2+ horas seguidas
    ISOLATED = "isolated"  # Horas boas soltas
    NONE = "none"  # Nenhuma hora boa

    @property
    def message(self) -> str:
        return _STATUS_MESSAGES[self]

    @property
    def color(self) -> DisplayColor:
        return _STATUS_COLORS[self]


_STATUS_MESSAGES = {
    DryingStatus.CONTINUOUS: Display.MESSAGE_CONTINUOUS,
    DryingStatus.ISOLATED: Display.MESSAGE_ISOLATED,
    DryingStatus.NONE: Display.MESSAGE_NONE,
}

_STATUS_COLORS = {
    DryingStatus.CONTINUOUS: DisplayColor.GOOD,
    DryingStatus.ISOLATED: DisplayColor.CAUTION,
    DryingStatus.NONE: DisplayColor.POOR,
}


@dataclass(frozen=True)
class DryingWindow:
    """Sequência contínua de horas adequadas (2+ horas)"""
    start_hour: int
    end_hour: int
    start_time: str
    end_time: str
    duration: int  # Número de horas na sequência
    average_score: float
    description: str

    @property
    def time_window(self) -> str:
        return f"{self.start_time} - {self.end_time}"

    def to_dict(self) -> dict:
        """Converte para dicionário para resposta da API"""
        return {
            'startHour': self.start_hour,
            'endHour': self.end_hour,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'timeWindow': self.time_window,
            'duration': self.duration,
            'averageScore': round(self.average_score, 1),
            'description': self.description,
        }


@dataclass(frozen=True)
class DryingRecommendation:
    """Recomendação do dia (valor terminal, recalculado sob demanda)"""
    status: DryingStatus
    best_window: Optional[DryingWindow] = None
    alternative_windows: Tuple[DryingWindow, ...] = ()

    @property
    def message(self) -> str:
        return self.status.message

    @property
    def color(self) -> DisplayColor:
        return self.status.color

    @property
    def windows(self) -> Tuple[DryingWindow, ...]:
        """Melhor janela seguida das alternativas"""
        if self.best_window is None:
            return ()
        return (self.best_window,) + self.alternative_windows

    @classmethod
    def for_status(
        cls,
        status: DryingStatus,
        best_window: Optional[DryingWindow] = None,
        alternative_windows: Tuple[DryingWindow, ...] = ()
    ) -> DryingRecommendation:
        return cls(status=status, best_window=best_window, alternative_windows=tuple(alternative_windows))

    def to_dict(self) -> dict:
        """Converte para dicionário para resposta da API"""
        return {
            'status': self.status.value,
            'message': self.message,
            'color': self.color.value,
            'timeWindow': self.best_window.time_window if self.best_window else 'N/A',
            'duration': self.best_window.duration if self.best_window else 0,
            'averageScore': round(self.best_window.average_score, 1) if self.best_window else 0,
            'alternativeWindows': [window.to_dict() for window in self.alternative_windows],
        }
