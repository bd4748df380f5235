import logging

def configure_logging(level: int = logging.INFO) -> None:
    """Configura logging por defecto sólo si el root no tiene handlers."""
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
