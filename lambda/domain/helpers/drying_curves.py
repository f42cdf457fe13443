"""
Drying Curves - Curvas de normalização (0-100) para os fatores de secagem
Helper utilitário: funções puras, sem estado, todas limitadas a [0, 100]
"""
import math

from domain.constants import Curves, Drying


def clamp_score(value: float) -> float:
    """Limita um score a [0, 100] (NaN vira 0)"""
    if math.isnan(value):
        return Drying.MIN_SCORE
    return max(Drying.MIN_SCORE, min(Drying.MAX_SCORE, value))


def _interpolate(value: float, x0: float, x1: float, y0: float, y1: float) -> float:
    """Interpolação linear de value entre (x0, y0) e (x1, y1)"""
    return y0 + (value - x0) / (x1 - x0) * (y1 - y0)


def score_humidity(relative_humidity: float) -> float:
    """
    Score de umidade relativa (menor é melhor)

    Faixas:
        - <= 30%: 100 (ar seco)
        - 30-50%: 100 -> 80
        - 50-70%: 80 -> 40
        - 70-90%: 40 -> 0
        - >= 90%: 0 (perto da saturação)
    """
    rh = relative_humidity
    if rh <= Curves.HUMIDITY_DRY:
        return 100.0
    if rh <= Curves.HUMIDITY_COMFORT:
        return _interpolate(rh, Curves.HUMIDITY_DRY, Curves.HUMIDITY_COMFORT, 100.0, 80.0)
    if rh <= Curves.HUMIDITY_DAMP:
        return _interpolate(rh, Curves.HUMIDITY_COMFORT, Curves.HUMIDITY_DAMP, 80.0, 40.0)
    if rh <= Curves.HUMIDITY_SATURATED:
        return _interpolate(rh, Curves.HUMIDITY_DAMP, Curves.HUMIDITY_SATURATED, 40.0, 0.0)
    return 0.0


def score_temperature(temperature: float) -> float:
    """
    Score de temperatura (mais quente é melhor até 25°C, penalizado acima)

    Faixas:
        - < 5°C: 0 -> 30
        - 5-15°C: 30 -> 80
        - 15-25°C: 80 -> 100
        - 25-35°C: 100 -> 70
        - > 35°C: cai 2 pontos por grau
    """
    t = temperature
    if t < Curves.TEMP_MIN:
        return clamp_score(t / Curves.TEMP_MIN * 30.0)
    if t <= Curves.TEMP_OPTIMAL_LOW:
        return _interpolate(t, Curves.TEMP_MIN, Curves.TEMP_OPTIMAL_LOW, 30.0, 80.0)
    if t <= Curves.TEMP_OPTIMAL_HIGH:
        return _interpolate(t, Curves.TEMP_OPTIMAL_LOW, Curves.TEMP_OPTIMAL_HIGH, 80.0, 100.0)
    if t <= Curves.TEMP_MAX:
        return _interpolate(t, Curves.TEMP_OPTIMAL_HIGH, Curves.TEMP_MAX, 100.0, 70.0)
    return clamp_score(70.0 - (t - Curves.TEMP_MAX) * 2.0)


def score_dew_point_spread(spread: float) -> float:
    """
    Score da diferença temperatura - ponto de orvalho

    Spread pequeno = risco de condensação; >= 5°C = potencial evaporativo pleno.
    """
    if spread < Drying.MIN_DEW_POINT_SPREAD:
        return 0.0
    if spread < Curves.SPREAD_LOW:
        return _interpolate(spread, Drying.MIN_DEW_POINT_SPREAD, Curves.SPREAD_LOW, 0.0, 50.0)
    if spread < Curves.SPREAD_GOOD:
        return _interpolate(spread, Curves.SPREAD_LOW, Curves.SPREAD_GOOD, 50.0, 100.0)
    return 100.0


def score_wind_speed(wind_speed: float) -> float:
    """
    Score de vento (km/h) - curva limitada e não monotônica

    Calmaria seca devagar; vento forte demais derruba a roupa do varal.
    Pico em 25 km/h:
        - < 5: 0 -> 50
        - 5-15: 50 -> 80
        - 15-25: 80 -> 100
        - 25-40: 100 -> 55
        - > 40: cai 2 pontos por km/h
    """
    w = max(0.0, wind_speed)
    if w < Curves.WIND_LIGHT:
        return w * 10.0
    if w < Curves.WIND_MODERATE:
        return _interpolate(w, Curves.WIND_LIGHT, Curves.WIND_MODERATE, 50.0, 80.0)
    if w <= Curves.WIND_PEAK:
        return _interpolate(w, Curves.WIND_MODERATE, Curves.WIND_PEAK, 80.0, 100.0)
    if w <= Curves.WIND_STRONG:
        return _interpolate(w, Curves.WIND_PEAK, Curves.WIND_STRONG, 100.0, 55.0)
    return clamp_score(55.0 - (w - Curves.WIND_STRONG) * 2.0)


def score_cloud_cover(cloud_cover: float) -> float:
    """Score de nebulosidade (inverso linear)"""
    return clamp_score(100.0 - cloud_cover)


def score_vapour_pressure_deficit(vpd_kpa: float) -> float:
    """
    Score do déficit de pressão de vapor (kPa) - maior é melhor

    Faixas:
        - <= 0.5: 0 -> 10
        - 0.5-1.0: 10 -> 30
        - 1.0-2.0: 30 -> 70
        - 2.0-3.0: 70 -> 95
        - > 3.0: 95 -> 100
    """
    v = max(0.0, vpd_kpa)
    if v <= 0.5:
        return v * 20.0
    if v <= 1.0:
        return _interpolate(v, 0.5, 1.0, 10.0, 30.0)
    if v <= 2.0:
        return _interpolate(v, 1.0, 2.0, 30.0, 70.0)
    if v <= 3.0:
        return _interpolate(v, 2.0, 3.0, 70.0, 95.0)
    return clamp_score(95.0 + (v - 3.0) * 2.0)


def score_wet_bulb_depression(temperature: float, wet_bulb: float) -> float:
    """
    Score da depressão de bulbo úmido (temperatura - bulbo úmido)

    Curva logarítmica: 1°C = 0, 3°C ~ 48, 10°C+ = 100.
    """
    depression = temperature - wet_bulb
    if depression < Curves.WET_BULB_MIN_DEPRESSION:
        return 0.0
    return clamp_score(100.0 * math.log10(depression))


def score_evapotranspiration(et0_mm_day: float) -> float:
    """
    Score da evapotranspiração de referência (mm/dia)

    Faixas:
        - <= 2: 0 -> 50
        - 2-5: 50 -> 100
        - > 5: 100
    """
    e = max(0.0, et0_mm_day)
    if e <= Curves.ET0_MODERATE:
        return e * 25.0
    if e <= Curves.ET0_HIGH:
        return _interpolate(e, Curves.ET0_MODERATE, Curves.ET0_HIGH, 50.0, 100.0)
    return 100.0


def score_shortwave_radiation(radiation_wm2: float) -> float:
    """Score de radiação solar (W/m²): 0 à noite, 100 a partir de 300 W/m²"""
    if radiation_wm2 <= 0:
        return 0.0
    return clamp_score(radiation_wm2 / Curves.RADIATION_FULL * 100.0)


def score_sunshine_duration(sunshine_hours: float) -> float:
    """Score de insolação dentro da hora (0.5h = 50, 1h = 100)"""
    if sunshine_hours < Curves.SUNSHINE_MIN_HOURS:
        return 0.0
    return clamp_score(sunshine_hours * 100.0)


def blend(base_score: float, advanced_score: float) -> float:
    """
    Combina a curva base com a métrica avançada

    Fórmula: (1 - b) × base + b × avançada, b = Drying.ADVANCED_METRIC_BLEND
    """
    weight = Drying.ADVANCED_METRIC_BLEND
    return clamp_score((1.0 - weight) * base_score + weight * advanced_score)
