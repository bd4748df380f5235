from pathlib import Path
from src.experiments.runner import run_grid, summarize
from src.cli.logging_utils import configure_logging

def main():
    configure_logging()
    out_csv = Path("outputs/experiments/arrivals_grid.csv")
    csv_path = run_grid(
        out_csv=out_csv,
        scenario_lengths=[240, 480],
        announcement_rates=[5.0, 10.0, 20.0],
        orders_per_announcement=[1.0, 1.2, 2.5],
        seeds=[7, 11],       # rápido para demo; puedes ampliarlo
    )
    print(f"CSV: {csv_path}")
    print(summarize(csv_path).to_string(index=False))

if __name__ == "__main__":
    main()
