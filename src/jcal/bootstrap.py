from __future__ import annotations
from jcal.core.engine import EngineRegistry
from jcal.engines.specs import ALL_SPECS
from jcal.engines.factory import make_engine

def build_registry() -> EngineRegistry:
    engines = {}
    for system, spec in ALL_SPECS.items():
        engines[system] = make_engine(spec)
    return EngineRegistry(engines)
