"""
jcal.engines.factory
--------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from jcal.core.types import EngineSpec
from jcal.engines.interfaces import CalendarEngineProtocol
from jcal.engines.gregorian import GregorianParams, GregorianEngine
from jcal.engines.jalali import JalaliParams, JalaliEngine


def make_engine(spec: EngineSpec) -> CalendarEngineProtocol:
    """The universal entry point."""
    if isinstance(spec.params, JalaliParams):
        return JalaliEngine(spec.id, spec.params)
    if isinstance(spec.params, GregorianParams):
        return GregorianEngine(spec.id, spec.params)
    raise TypeError(f"Unknown engine params type: {type(spec.params)}")
