"""
Script de visualização das curvas de secagem
Plota cada curva de normalização (valor -> score 0-100) e imprime a tabela de pesos
"""
import os
import sys

import matplotlib.pyplot as plt
import numpy as np

# Adiciona o diretório lambda ao path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'lambda'))

from domain.constants import Drying
from domain.helpers import drying_curves as curves

OUTPUT_DIR = 'output'

# (título, eixo x, domínio, função)
BASE_CURVES = [
    ('Umidade (30%)', 'Umidade relativa (%)', (0, 100), curves.score_humidity),
    ('Temperatura (20%)', 'Temperatura (°C)', (-5, 45), curves.score_temperature),
    ('Dew point spread (20%)', 'Temperatura - orvalho (°C)', (0, 12), curves.score_dew_point_spread),
    ('Vento (15%)', 'Vento (km/h)', (0, 70), curves.score_wind_speed),
    ('Nebulosidade (15%)', 'Cobertura de nuvens (%)', (0, 100), curves.score_cloud_cover),
]

ADVANCED_CURVES = [
    ('VPD -> umidade', 'VPD (kPa)', (0, 4), curves.score_vapour_pressure_deficit),
    ('Bulbo úmido -> temperatura', 'Depressão (°C)', (0, 15),
     lambda depression: curves.score_wet_bulb_depression(depression, 0.0)),
    ('ET0 -> spread', 'ET0 (mm/dia)', (0, 7), curves.score_evapotranspiration),
    ('Radiação -> nuvens', 'Radiação (W/m²)', (0, 600), curves.score_shortwave_radiation),
]


def _plot(ax, title, xlabel, domain, func):
    xs = np.linspace(domain[0], domain[1], 300)
    ax.plot(xs, [func(float(x)) for x in xs], linewidth=2)
    ax.axhline(y=Drying.SUITABLE_SCORE_THRESHOLD, color='gray', linestyle='--', alpha=0.5)
    ax.set_ylim(-5, 105)
    ax.set_xlabel(xlabel, fontsize=10)
    ax.set_ylabel('Score', fontsize=10)
    ax.set_title(title, fontsize=11, fontweight='bold')
    ax.grid(True, alpha=0.3)


def plot_drying_curves():
    """Plota curvas base e avançadas em uma grade 3x3"""
    fig, axes = plt.subplots(3, 3, figsize=(15, 12))
    panels = BASE_CURVES + ADVANCED_CURVES

    for ax, (title, xlabel, domain, func) in zip(axes.flat, panels):
        _plot(ax, title, xlabel, domain, func)

    # Painel extra vazio
    for ax in list(axes.flat)[len(panels):]:
        ax.axis('off')

    fig.tight_layout()
    os.makedirs(OUTPUT_DIR, exist_ok=True)
    path = os.path.join(OUTPUT_DIR, 'drying_curves.png')
    fig.savefig(path, dpi=150, bbox_inches='tight')
    print(f"\n✓ Gráfico salvo em: {path}")
    plt.show()


def print_weights_table():
    """Imprime pesos e contribuição máxima de cada componente"""
    print("\n" + "=" * 60)
    print("PESOS DOS COMPONENTES")
    print("=" * 60)
    for name, weight in Drying.WEIGHTS.items():
        print(f"  {name:<20} {weight:>5.0%}   máx. {weight * 100:>5.1f} pontos")
    print("-" * 60)
    print(f"  {'total':<20} {sum(Drying.WEIGHTS.values()):>5.0%}")
    print(f"\n  Hora adequada: score >= {Drying.SUITABLE_SCORE_THRESHOLD}")
    print(f"  Janela contínua: >= {Drying.MIN_WINDOW_HOURS} horas seguidas")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    print_weights_table()
    print("Gerando gráficos...")
    plot_drying_curves()
    print("\n✓ Análise completa!")
