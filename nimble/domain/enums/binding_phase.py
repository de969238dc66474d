"""Phases of the one-shot binding pass.

Transitions are strictly sequential:

    NOT_STARTED -> DERIVING_SCOPES -> REGISTERING_BOUND -> REGISTERING_UNBOUND -> DONE

DERIVING_SCOPES and REGISTERING_BOUND alternate once per module. There is no
failed or rolled-back state: a binder that raised stays in the phase where the
error happened and cannot be run again.
"""

from enum import Enum


class BindingPhase(str, Enum):
    """Binder state machine phases."""

    NOT_STARTED = "not_started"
    DERIVING_SCOPES = "deriving_scopes"
    REGISTERING_BOUND = "registering_bound"
    REGISTERING_UNBOUND = "registering_unbound"
    DONE = "done"
