from pathlib import Path
from typing import Sequence
import csv
import logging

import pandas as pd

from src.demand.rng import RNG
from src.demand.generator import PoissonArrivalTimes
from src.experiments.kpis import RowKPIs, to_row

logger = logging.getLogger(__name__)

FIELDS = list(RowKPIs.__dataclass_fields__)
CONFIG_COLS = ["scenario_length", "announcement_rate", "orders_per_announcement"]

def run_grid(
    out_csv: Path,
    scenario_lengths: Sequence[int] = (240, 480),
    announcement_rates: Sequence[float] = (5.0, 10.0, 20.0),   # por hora
    orders_per_announcement: Sequence[float] = (1.0, 1.2, 2.5),
    seeds: Sequence[int] = (7, 11, 23),
) -> Path:
    """Una fila de KPIs por (configuración, semilla). Cada semilla usa un RNG propio."""
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    n_rows = 0
    with out_csv.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for length in scenario_lengths:
            for rate in announcement_rates:
                for opa in orders_per_announcement:
                    gen = PoissonArrivalTimes(length, rate, opa)
                    for seed in seeds:
                        trace = gen.generate_trace(RNG(seed=seed))
                        w.writerow(to_row(length, rate, opa, seed, trace).to_dict())
                        n_rows += 1
    logger.info("grid: %d corridas -> %s", n_rows, out_csv)
    return out_csv

def summarize(csv_path: Path) -> pd.DataFrame:
    """Promedios por configuración (sobre semillas)."""
    df = pd.read_csv(csv_path)
    return (df
        .groupby(CONFIG_COLS, as_index=False)[["announcements", "orders", "realized_opa", "mean_gap_min"]]
        .mean())
