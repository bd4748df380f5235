from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any
from src.demand.errors import InvalidConfigError, check_positive, check_minutes

@dataclass(frozen=True)
class GeneratorConfig:
    scenario_length: int            # minutos
    announcement_rate: float        # anuncios por hora
    orders_per_announcement: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "scenario_length", check_minutes("scenario_length", self.scenario_length))
        object.__setattr__(self, "announcement_rate", check_positive("announcement_rate", self.announcement_rate))
        object.__setattr__(self, "orders_per_announcement",
                           check_positive("orders_per_announcement", self.orders_per_announcement))

    def validate(self) -> None:
        check_minutes("scenario_length", self.scenario_length)
        check_positive("announcement_rate", self.announcement_rate)
        check_positive("orders_per_announcement", self.orders_per_announcement)

    @property
    def expected_announcements(self) -> float:
        return self.announcement_rate * self.scenario_length / 60.0

@dataclass
class ScenarioConfig:
    name: str
    generator: GeneratorConfig
    seeds: List[int] = field(default_factory=lambda: [0])
    notes: Optional[str] = None

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ScenarioConfig":
        return ScenarioConfig(
            name=d["name"],
            generator=GeneratorConfig(**d["generator"]),
            seeds=list(d.get("seeds", [0])),
            notes=d.get("notes"),
        )

    @staticmethod
    def default() -> "ScenarioConfig":
        """Configuración por código (no necesitas JSON)."""
        return ScenarioConfig.from_dict({
            "name": "pdp-8h",
            "generator": {
                "scenario_length": 8 * 60,
                "announcement_rate": 10.0,
                "orders_per_announcement": 1.2,
            },
            "seeds": [7, 11, 23],
            "notes": "Jornada de 8 h; ~80 anuncios, 1 o 2 pedidos por anuncio",
        })

    def validate(self) -> None:
        if not self.name:
            raise InvalidConfigError("Falta name")
        if not self.seeds:
            raise InvalidConfigError("Definir al menos una semilla")
        self.generator.validate()

    def summary(self) -> str:
        g = self.generator
        s = []
        s.append("=== ESCENARIO ===")
        s.append(f"Nombre: {self.name}")
        s.append(f"Horizonte: {g.scenario_length} min")
        s.append(f"Ritmo de anuncios: {g.announcement_rate} /h")
        s.append(f"Pedidos por anuncio: {g.orders_per_announcement}")
        s.append(f"Anuncios esperados: {g.expected_announcements:.1f}")
        s.append(f"Semillas: {self.seeds}")
        if self.notes:
            s.append(f"Notas: {self.notes}")
        return "\n".join(s)
