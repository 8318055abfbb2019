"""
Domain Constants - Todas as constantes da aplicação centralizadas
Thresholds meteorológicos, TTLs de cache e endpoints das APIs públicas
"""


class API:
    """Constantes de APIs externas"""

    # INMET (estações automáticas e avisos)
    INMET_BASE_URL = "https://apitempo.inmet.gov.br"
    INMET_STATIONS_PATH = "/estacoes/T"
    INMET_ALERTS_URL = "https://apiprevmet3.inmet.gov.br/avisos/ativos"
    INMET_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    # Open-Meteo
    OPENMETEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
    OPENMETEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
    OPENMETEO_PAST_HOURS = 24
    OPENMETEO_MAX_STATIONS = 50  # coordenadas por chamada em lote

    # RainViewer
    RAINVIEWER_MAPS_URL = "https://api.rainviewer.com/public/weather-maps.json"
    RAINVIEWER_TILE_SIZE = 256
    RAINVIEWER_COLOR_SCHEME = 2

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_CONNECT = 5  # segundos
    HTTP_TIMEOUT_READ = 10  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos

    # Chamada interna ao próprio /api/weather
    SELF_CALL_TIMEOUT = 5  # segundos

    # Paralelismo de buscas por estação
    FETCH_BATCH_SIZE = 5


class Cache:
    """Constantes de cache em memória"""

    # TTLs por tipo de dado (segundos)
    TTL_WEATHER = 300  # 5 minutos (dados ao vivo)
    TTL_STATE_WEATHER = 300  # 5 minutos
    TTL_ALERTS = 600  # 10 minutos
    TTL_STATIONS = 3600  # 1 hora (lista de estações)
    TTL_STATION_METADATA = 86400  # 24 horas (catálogo completo do INMET)
    TTL_RADAR = 600  # 10 minutos

    # Prefixos de chave
    PREFIX_STATION = "station_"
    PREFIX_COORDINATES = "coords_"
    PREFIX_STATE = "state_"
    KEY_STATIONS = "stations"
    KEY_STATION_METADATA = "inmet_stations"
    KEY_ALERTS = "alerts"
    KEY_RADAR = "radar"


class Thresholds:
    """Limiares fixos de alerta (convenção meteorológica)"""

    # Chuva (mm)
    RAIN_1H_ATTENTION = 10.0
    RAIN_1H_ALERT = 20.0
    RAIN_1H_SEVERE = 30.0
    RAIN_24H_SEVERE = 50.0

    # Rajada de vento (km/h)
    WIND_GUST_ALERT = 60.0

    # Recência da última observação (minutos)
    STATUS_ONLINE_MINUTES = 15
    STATUS_DELAYED_MINUTES = 60


class Monitoring:
    """Escopo monitorado pelo painel"""

    MONITORED_STATES = ("SP", "RJ", "MG", "PR", "SC", "RS")
    DEFAULT_CAPITAL = "sao-paulo"
    AUTOMATIC_STATION_TYPE = "Automatica"


class Sources:
    """Rótulos de origem exibidos nas respostas"""

    INMET = "INMET"
    OPEN_METEO = "open-meteo"
    INMET_STATIONS = "inmet"
    RAINVIEWER = "rainviewer"
    CALCULATED = "AClima (calculado)"


class App:
    """Constantes da aplicação"""

    # Timezone padrão
    TIMEZONE = "America/Sao_Paulo"

    # Janela de observação das estações
    OBSERVATION_WINDOW_HOURS = 24
