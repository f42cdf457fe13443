"""
Domain Constants - Todas as constantes da aplicação centralizadas
Política de secagem (pesos, curvas, thresholds) + APIs externas + app
"""
import os


class API:
    """Constantes de APIs externas"""

    # Open-Meteo
    OPENMETEO_BASE_URL = "https://api.open-meteo.com/v1"

    # Nominatim (OpenStreetMap) - reverse geocoding
    NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = int(os.environ.get('HTTP_TIMEOUT_TOTAL', '8'))  # segundos
    HTTP_TIMEOUT_CONNECT = 3  # segundos
    HTTP_TIMEOUT_READ = 5  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos

    # Variáveis horárias pedidas ao Open-Meteo (ordem irrelevante)
    OPENMETEO_HOURLY_FIELDS = (
        'temperature_2m',
        'relative_humidity_2m',
        'dew_point_2m',
        'wind_speed_10m',
        'cloud_cover',
        'precipitation',
        'precipitation_probability',
        'vapour_pressure_deficit',
        'wet_bulb_temperature_2m',
        'shortwave_radiation',
        'sunshine_duration',
        'et0_fao_evapotranspiration',
    )
    OPENMETEO_DAILY_FIELDS = ('sunrise', 'sunset')


class Drying:
    """
    Política de secagem de roupa ao ar livre

    Pesos fixos dos componentes (somam 1.0) e thresholds globais.
    Alterar qualquer valor aqui muda o contrato do HourScorer/PatternAnalyzer.
    """

    # Pesos dos componentes no score total
    WEIGHTS = {
        'humidity': 0.30,
        'temperature': 0.20,
        'dew_point_spread': 0.20,
        'wind_speed': 0.15,
        'cloud_cover': 0.15,
    }

    # Hora "boa" para secar: total_score >= 60
    SUITABLE_SCORE_THRESHOLD = 60.0

    # Janela contínua mínima (horas consecutivas adequadas)
    MIN_WINDOW_HOURS = 2

    # Janelas além da melhor que entram na recomendação
    MAX_ALTERNATIVE_WINDOWS = 2

    # Peso das métricas avançadas quando presentes (0.5 = média com a curva base)
    ADVANCED_METRIC_BLEND = 0.5

    # Desqualificação
    RAIN_PROBABILITY_DISQUALIFY = 25  # % - a partir de 25% a hora é descartada
    MIN_DEW_POINT_SPREAD = 1.0  # °C - abaixo disso há risco de condensação

    REASON_RAINFALL = "rainfall detected"
    REASON_RAIN_RISK = "high rain risk"
    REASON_CONDENSATION = "condensation risk"
    REASON_DARKNESS = "outside daylight hours"

    # Limites de score
    MIN_SCORE = 0.0
    MAX_SCORE = 100.0


class Curves:
    """Pontos de quebra das curvas de normalização (piecewise linear)"""

    # Umidade relativa (%) - menor é melhor
    HUMIDITY_DRY = 30.0  # até aqui = 100
    HUMIDITY_COMFORT = 50.0  # 80
    HUMIDITY_DAMP = 70.0  # 40
    HUMIDITY_SATURATED = 90.0  # 0

    # Temperatura (°C) - mais quente é melhor até o teto prático
    TEMP_MIN = 5.0
    TEMP_OPTIMAL_LOW = 15.0
    TEMP_OPTIMAL_HIGH = 25.0
    TEMP_MAX = 35.0

    # Dew point spread (°C)
    SPREAD_LOW = 3.0
    SPREAD_GOOD = 5.0

    # Vento (km/h) - curva não monotônica, pico em 25 km/h
    WIND_LIGHT = 5.0
    WIND_MODERATE = 15.0
    WIND_PEAK = 25.0
    WIND_STRONG = 40.0

    # Radiação de onda curta (W/m²)
    RADIATION_FULL = 300.0

    # Insolação (horas de sol dentro da hora)
    SUNSHINE_MIN_HOURS = 0.1

    # Evapotranspiração de referência (mm/dia)
    ET0_MODERATE = 2.0
    ET0_HIGH = 5.0

    # Depressão de bulbo úmido (°C)
    WET_BULB_MIN_DEPRESSION = 1.0


class Display:
    """Mensagens fixas por status (texto exibido ao usuário)"""

    MESSAGE_CONTINUOUS = "Get The Washing Out"
    MESSAGE_ISOLATED = "Brief Gaps for Outdoor Drying"
    MESSAGE_NONE = "Indoor Drying Only"

    # Fallbacks de colaboradores externos
    UNKNOWN_LOCATION = "Unknown Location"
    SUMMARY_FALLBACK = (
        "AI summary temporarily unavailable. "
        "Your drying recommendation above is still accurate."
    )

    # Descrições de janela por média de score (ordem decrescente)
    WINDOW_DESCRIPTIONS = (
        (80.0, "Excellent drying conditions"),
        (70.0, "Very good drying conditions"),
        (60.0, "Good drying conditions"),
        (55.0, "Decent drying conditions"),
    )
    WINDOW_DESCRIPTION_DEFAULT = "Acceptable drying conditions"


class Geo:
    """Constantes geográficas"""

    MIN_LATITUDE = -90
    MAX_LATITUDE = 90
    MIN_LONGITUDE = -180
    MAX_LONGITUDE = 180


class App:
    """Constantes da aplicação"""

    # CORS
    CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')

    # Timezone padrão (Reino Unido e Irlanda - GMT/BST)
    TIMEZONE = os.environ.get('DRYING_TIMEZONE', 'Europe/London')

    # Horas em um dia
    HOURS_PER_DAY = 24
