import importlib.util
from pathlib import Path
from types import ModuleType

from rangecomp.models import Interval
from rangecomp.sampling import is_non_degenerate, iter_intervals

SCRIPTS_DIR = Path(__file__).resolve().parents[1] / "scripts"


def load_script_module(script: Path, module_name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(module_name, script)
    if spec is None or spec.loader is None:
        raise RuntimeError(f"Failed to load script module from {script}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def well_formed_intervals(max_value: int) -> list[Interval]:
    return [
        interval
        for interval in iter_intervals(range(max_value + 1))
        if is_non_degenerate(interval)
    ]
