from dataclasses import dataclass, asdict
from typing import Dict, Any
from statistics import mean
from src.demand.generator import ArrivalTrace

@dataclass
class RowKPIs:
    scenario_length: int
    announcement_rate: float
    orders_per_announcement: float
    seed: int

    announcements: int
    orders: int
    realized_opa: float
    mean_gap_min: float
    first_min: int
    last_min: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

def to_row(scenario_length: int, rate: float, opa: float, seed: int,
           trace: ArrivalTrace) -> RowKPIs:
    ann = trace.announcements
    gaps = [b - a for a, b in zip(ann, ann[1:])]
    return RowKPIs(
        scenario_length=scenario_length,
        announcement_rate=rate,
        orders_per_announcement=opa,
        seed=seed,
        announcements=len(ann),
        orders=trace.n_orders,
        realized_opa=trace.n_orders / len(ann),
        mean_gap_min=mean(gaps) if gaps else 0.0,
        first_min=ann[0],
        last_min=ann[-1],
    )
