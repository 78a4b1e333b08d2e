"""Run configuration.

:class:`PilotConfig` collects everything a single run needs. The CLI builds
one from its options; library callers can construct their own and hand it to
:func:`sub_pilot.cli.run`.
"""

from dataclasses import dataclass
from typing import Tuple

from sub_pilot.models import DEFAULT_MODELS

DEFAULT_INPUT_PATH = "input.txt"


@dataclass(frozen=True)
class PilotConfig:
    """Settings for one course run.

    Attributes:
        input_path (str): Course file to read.
        models (Tuple[str, ...]): Registry names to report, in output order.
        verbose (bool): Emit debug logs, including every intermediate state.
        log_json (bool): Render logs as JSON lines instead of console output.
    """

    input_path: str = DEFAULT_INPUT_PATH
    models: Tuple[str, ...] = DEFAULT_MODELS
    verbose: bool = False
    log_json: bool = False
