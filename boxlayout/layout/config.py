"""Solver configuration shared by layout builds."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..logging_utils import debug_log_call

logger = logging.getLogger(__name__)


@dataclass
class SolverOptions:
    """Opaque resource configuration forwarded to ``z3.Optimize.set``."""

    timeout_ms: Optional[int] = None
    params: Dict[str, object] = field(default_factory=dict)

    def solver_params(self) -> Dict[str, object]:
        params = dict(self.params)
        if self.timeout_ms is not None:
            if self.timeout_ms <= 0:
                raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")
            params["timeout"] = int(self.timeout_ms)
        return params


_SOLVER_OPTIONS = SolverOptions()


def get_solver_options() -> SolverOptions:
    return copy.deepcopy(_SOLVER_OPTIONS)


@debug_log_call(logger, log_result=False)
def set_solver_options(options: SolverOptions) -> None:
    global _SOLVER_OPTIONS
    _SOLVER_OPTIONS = copy.deepcopy(options)

