"""
Configuração centralizada de logging
Logger AWS Lambda Powertools com o service name do Datadog (DD_SERVICE)
"""
from typing import Optional

from aws_lambda_powertools import Logger

from shared.config.settings import SERVICE_NAME


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Módulos internos usam child=True para herdar o contexto (request_id,
    cold_start) injetado pelo handler via inject_lambda_context.

    Args:
        service_name: Nome do serviço (padrão: SERVICE_NAME)
        child: Se True, cria um child logger
    """
    return Logger(service=service_name or SERVICE_NAME, child=child)


# Logger principal da aplicação
logger = get_logger()
