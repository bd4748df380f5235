import argparse
from pathlib import Path
from src.scenario.scenario_config import ScenarioConfig
from src.scenario.config_loader import load_config

def main():
    parser = argparse.ArgumentParser(description="Validar e imprimir la configuración del escenario.")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML (opcional)")
    args = parser.parse_args()

    cfg = ScenarioConfig.default() if not args.config else ScenarioConfig.from_dict(load_config(args.config))
    cfg.validate()
    print(cfg.summary())

if __name__ == "__main__":
    main()
