import argparse
import logging
from src.demand.rng import RNG
from src.demand.generator import PoissonArrivalTimes
from src.cli.logging_utils import configure_logging

def main():
    parser = argparse.ArgumentParser(description="Generar tiempos de llegada de pedidos (Poisson).")
    parser.add_argument("--length", type=int, default=240, help="Horizonte en minutos")
    parser.add_argument("--rate", type=float, default=10.0, help="Anuncios por hora")
    parser.add_argument("--opa", type=float, default=1.2, help="Pedidos por anuncio (media)")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    gen = PoissonArrivalTimes(args.length, args.rate, args.opa)
    trace = gen.generate_trace(RNG(seed=args.seed))
    print(f"Anuncios: {trace.n_announcements}  Pedidos: {trace.n_orders}  en {args.length} min")
    print("Primeros 10 tiempos:", trace.times[:10])

if __name__ == "__main__":
    main()
