"""
Lambda entrypoint - Drying Forecast API
Delega para o adapter HTTP (infrastructure.adapters.input.lambda_handler)
"""
from infrastructure.adapters.input.lambda_handler import lambda_handler

__all__ = ['lambda_handler']
