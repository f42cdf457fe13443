"""
Configurações centralizadas da aplicação (variáveis de ambiente)
"""
import os

# Nome do serviço (Datadog / Powertools)
SERVICE_NAME = os.environ.get('DD_SERVICE', 'drying-forecast')

# Nominatim exige User-Agent identificando a aplicação
NOMINATIM_USER_AGENT = os.environ.get(
    'NOMINATIM_USER_AGENT',
    'drying-forecast/1.0 (laundry drying recommendations)'
)
