"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import asyncio

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases
from application.dtos.requests import AnalyzeHoursRequest, GetDryingForecastRequest
from application.use_cases.analyze_hours_use_case import AnalyzeHoursUseCase
from application.use_cases.get_drying_forecast_use_case import GetDryingForecastUseCase

# Domain Layer - Exceptions e constantes
from domain.constants import App
from domain.exceptions import (
    InvalidCoordinatesException,
    InvalidDateTimeException,
    InvalidRequestException,
    WeatherDataNotFoundException,
    WeatherProviderException,
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.providers.nominatim.nominatim_geocoder import get_nominatim_geocoder
from infrastructure.adapters.output.providers.openmeteo.openmeteo_provider import get_openmeteo_provider

# Shared Layer - Utilities
from shared.config.logger_config import get_logger
from shared.utils.datetime_parser import DateTimeParser
from shared.utils.validators import CoordinatesValidator, HourValidator

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=App.CORS_ORIGIN))

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.exception_handler(InvalidCoordinatesException)(exception_service.handle_invalid_coordinates)
app.exception_handler(InvalidDateTimeException)(exception_service.handle_invalid_datetime)
app.exception_handler(InvalidRequestException)(exception_service.handle_invalid_request)
app.exception_handler(WeatherDataNotFoundException)(exception_service.handle_weather_data_not_found)
app.exception_handler(WeatherProviderException)(exception_service.handle_weather_provider_error)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


# =============================
# Routes (Async execution with sync wrappers for AWS Powertools compatibility)
# =============================

@app.get("/api/drying")
def get_drying_forecast_route():
    """
    GET /api/drying?lat=51.5&lon=-0.12&date=2025-06-14&fromHour=9

    Returns hourly drying scores and the day's recommendation

    Query params:
    - lat, lon: Coordinates in degrees (required)
    - date: Date in format YYYY-MM-DD (optional, default: today)
    - fromHour: Ignore earlier hours (optional, default: current hour when date is today)

    Note: Uses persistent event loop for true client reuse
    """
    query = app.current_event
    coordinates = CoordinatesValidator.from_query_params(
        query.get_query_string_value(name="lat", default_value=None),
        query.get_query_string_value(name="lon", default_value=None)
    )

    # Parse date (throws InvalidDateTimeException)
    target_date = DateTimeParser.parse_date(query.get_query_string_value(name="date", default_value=None))

    from_hour = query.get_query_string_value(name="fromHour", default_value=None)
    start_from_hour = (
        HourValidator.validate(from_hour, "fromHour")
        if from_hour is not None
        else DateTimeParser.remaining_hours_start(target_date)
    )

    request = GetDryingForecastRequest(
        latitude=coordinates.latitude,
        longitude=coordinates.longitude,
        target_date=target_date,
        start_from_hour=start_from_hour
    )

    async def execute_async():
        use_case = GetDryingForecastUseCase(
            weather_provider=get_openmeteo_provider(),
            geocoder=get_nominatim_geocoder()
        )
        return await use_case.execute(
            latitude=request.latitude,
            longitude=request.longitude,
            target_date=request.target_date,
            start_from_hour=request.start_from_hour
        )

    # Run async code with persistent loop
    forecast = run_async(execute_async())

    return forecast.to_api_response()


@app.post("/api/drying/analyze")
def post_analyze_hours_route():
    """
    POST /api/drying/analyze
    Body: { "hours": [ {"temperature": 20, "humidity": 45, "dewPoint": 8,
                        "windSpeed": 15, "cloudCover": 30}, ... ],
            "startFromHour": 9 }

    Scores caller-provided hours in-process (no upstream calls)
    """
    request = AnalyzeHoursRequest.from_body(app.current_event.json_body)

    result = AnalyzeHoursUseCase().execute(request)

    return result.to_dict()


# =============================
# Lambda Handler
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Datadog APM manages:
    - Distributed tracing of outbound provider calls

    Available routes:
    - GET  /api/drying?lat=..&lon=..&date=YYYY-MM-DD
    - POST /api/drying/analyze
    """
    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        session_id=headers.get('x-session-id', 'N/A')
    )

    response = app.resolve(event, context)

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    Reutiliza o loop entre invocações (warm starts) para que a sessão
    aiohttp permaneça válida.
    """
    global _global_event_loop

    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop

    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)

    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)

    Args:
        coro: Coroutine a ser executada

    Returns:
        Resultado da coroutine
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
