"""
Output Port: Summary Provider
Contrato para serviços que geram um resumo textual da previsão
"""
from abc import ABC, abstractmethod


class ISummaryProvider(ABC):
    """Interface para resumo em linguagem natural (opcional)"""

    @abstractmethod
    async def summarize(self, digest: str) -> str:
        """
        Gera um resumo curto a partir do digest compacto da previsão
        
        Args:
            digest: Texto compacto (uma linha por hora + recomendação)
        
        Returns:
            Resumo textual
        
        Raises:
            Qualquer exceção do serviço - o use case aplica o fallback
        """
        raise NotImplementedError
