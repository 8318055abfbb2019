"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import asyncio
import threading
from typing import Any, Dict

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases (ASYNC)
from application.dtos.requests import GeocodeRequest, GetWeatherRequest
from application.use_cases import (
    GeocodeCityUseCase,
    GetAlertsUseCase,
    GetCapitalWeatherUseCase,
    GetCoordinatesWeatherUseCase,
    GetRadarFramesUseCase,
    GetStateWeatherUseCase,
    GetStationsUseCase,
    GetStationWeatherUseCase,
)

# Domain Layer - Exceptions
from domain.exceptions import (
    CapitalNotFoundException,
    InvalidParameterException,
    LocationNotFoundException,
    StationNotFoundException,
    UpstreamProviderException,
    WeatherDataNotFoundException,
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.cache.cache_registry import get_cache_registry
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.providers.weather_provider_factory import get_weather_provider_factory
from infrastructure.adapters.output.station_catalog_repository import get_station_catalog

# Shared Layer - Utilities
from shared.config.logger_config import get_logger
from shared.config.settings import CORS_ORIGIN
from shared.utils.validators import (
    CapitalSlugValidator,
    CityQueryValidator,
    CoordinatesValidator,
    StateCodeValidator,
    StationCodeValidator,
)

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=CORS_ORIGIN))

# =============================
# Event loop por thread (persistente entre invocações Lambda)
# =============================
_loop_state = threading.local()

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.exception_handler(InvalidParameterException)(exception_service.handle_invalid_parameter)
app.exception_handler(StationNotFoundException)(exception_service.handle_not_found)
app.exception_handler(CapitalNotFoundException)(exception_service.handle_not_found)
app.exception_handler(WeatherDataNotFoundException)(exception_service.handle_not_found)
app.exception_handler(LocationNotFoundException)(exception_service.handle_location_not_found)
app.exception_handler(UpstreamProviderException)(exception_service.handle_upstream_error)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


def _query(name: str):
    value = app.current_event.get_query_string_value(name=name, default_value=None)
    if value is None or not value.strip():
        return None
    return value


def _success(response) -> Dict[str, Any]:
    """Envelope de sucesso: {success, ...payload, timestamp}"""
    return {'success': True, **response.to_api_response(), 'timestamp': response.timestamp}


def _station_weather_use_case() -> GetStationWeatherUseCase:
    return GetStationWeatherUseCase(
        catalog=get_station_catalog(),
        station_provider=get_weather_provider_factory().get_station_provider(),
        cache=get_cache_registry().weather
    )


def parse_weather_request() -> GetWeatherRequest:
    """
    Precedência: station > lat/lng > capital > state > São Paulo
    """
    station = _query('station')
    if station:
        return GetWeatherRequest(station=StationCodeValidator.validate(station))

    lat, lng = _query('lat'), _query('lng')
    if lat is not None or lng is not None:
        return GetWeatherRequest(coordinates=CoordinatesValidator.validate(lat, lng))

    capital = _query('capital')
    if capital:
        return GetWeatherRequest(capital=CapitalSlugValidator.validate(capital))

    state = _query('state')
    if state:
        return GetWeatherRequest(state=StateCodeValidator.validate(state))

    return GetWeatherRequest()


# =============================
# Routes (Async execution with sync wrappers for AWS Powertools compatibility)
# =============================

@app.get("/api/weather")
def get_weather_route():
    """
    GET /api/weather?station=A701
    GET /api/weather?capital=sao-paulo
    GET /api/weather?state=RJ
    GET /api/weather?lat=-23.55&lng=-46.63

    Sem parâmetros: estações de São Paulo
    """
    request = parse_weather_request()

    if request.station:
        response = run_async(_station_weather_use_case().execute(request.station))
    elif request.coordinates:
        use_case = GetCoordinatesWeatherUseCase(
            forecast_provider=get_weather_provider_factory().get_point_forecast_provider(),
            cache=get_cache_registry().weather
        )
        response = run_async(use_case.execute(request.coordinates))
    else:
        use_case = GetCapitalWeatherUseCase(
            catalog=get_station_catalog(),
            station_weather=_station_weather_use_case()
        )
        response = run_async(use_case.execute(capital_slug=request.capital, state_code=request.state))

    return _success(response)


@app.get("/api/weather-state")
def get_weather_state_route():
    """
    GET /api/weather-state?state=SP

    Todas as estações automáticas do estado (até 50)
    """
    state = StateCodeValidator.validate(_query('state'))

    factory = get_weather_provider_factory()
    registry = get_cache_registry()
    use_case = GetStateWeatherUseCase(
        catalog=get_station_catalog(),
        station_provider=factory.get_station_provider(),
        forecast_provider=factory.get_point_forecast_provider(),
        state_cache=registry.state_weather,
        metadata_cache=registry.station_metadata
    )
    return _success(run_async(use_case.execute(state)))


@app.get("/api/stations")
def get_stations_route():
    """GET /api/stations - estações INMET dos estados monitorados"""
    use_case = GetStationsUseCase(
        station_provider=get_weather_provider_factory().get_station_provider(),
        cache=get_cache_registry().stations
    )
    return _success(run_async(use_case.execute()))


@app.get("/api/alerts")
def get_alerts_route():
    """GET /api/alerts - alertas ativos ordenados por severidade"""
    use_case = GetAlertsUseCase(
        alert_sources=get_weather_provider_factory().get_alert_sources(get_station_catalog()),
        cache=get_cache_registry().alerts
    )
    return _success(run_async(use_case.execute()))


@app.get("/api/geocode")
def get_geocode_route():
    """
    GET /api/geocode?city=Campinas&state=SP

    `q` é aceito como alias de `city`
    """
    city, state = CityQueryValidator.validate(_query('city') or _query('q'), _query('state'))

    use_case = GeocodeCityUseCase(get_weather_provider_factory().get_geocoding_provider())
    return _success(run_async(use_case.execute(GeocodeRequest(city=city, state=state))))


@app.get("/api/radar")
def get_radar_route():
    """GET /api/radar - quadros de radar (passado + nowcast)"""
    use_case = GetRadarFramesUseCase(
        radar_provider=get_weather_provider_factory().get_radar_provider(),
        cache=get_cache_registry().radar
    )
    return _success(run_async(use_case.execute()))


# =============================
# Lambda Handler (100% ASYNC)
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function - 100% ASYNC

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Available routes:
    - GET /api/weather?station= | capital= | state= | lat=&lng=
    - GET /api/weather-state?state=SP
    - GET /api/stations
    - GET /api/alerts
    - GET /api/geocode?city=&state=
    - GET /api/radar
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

    # Add CORS headers manually
    if 'headers' not in response:
        response['headers'] = {}

    response['headers']['Access-Control-Allow-Origin'] = CORS_ORIGIN
    response['headers']['Access-Control-Allow-Headers'] = 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Requested-With,X-Session-Id'
    response['headers']['Access-Control-Allow-Methods'] = 'GET,OPTIONS'
    response['headers']['Access-Control-Max-Age'] = '86400'

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Retorna o event loop persistente da thread atual

    No Lambda há uma única thread, e o loop é reutilizado entre invocações
    (warm starts), mantendo a sessão aiohttp válida. No servidor local cada
    thread do werkzeug tem o seu loop; assim uma requisição aninhada (o feed
    interno de /api/alerts chamando /api/weather) não reentra num loop que
    já está rodando.
    """
    loop = getattr(_loop_state, 'loop', None)
    if loop is not None and not loop.is_closed():
        return loop

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    _loop_state.loop = loop

    return loop


def run_async(coro):
    """
    Executa coroutine no event loop da thread (NÃO fecha o loop)
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
