"""
Domain Helpers - Curvas de normalização (valor meteorológico -> score 0-100)
"""
from domain.helpers.drying_curves import blend, clamp_score

__all__ = ['blend', 'clamp_score']
