from pathlib import Path
from typing import Dict, Any
import json

import yaml

def load_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    if suffix in {".yml", ".yaml"}:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    raise ValueError(f"Formato no soportado: {path.suffix} (usa .json o .yaml)")
