"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from rigid.core.models import BootstrapContext, CommitStep, Receipt
"""

from rigid.core.models.action import Action, Receipt
from rigid.core.models.bootstrap import (
    AddRemoteStep,
    BootstrapContext,
    BootstrapResult,
    CommitStep,
    InitStep,
    PushStep,
    RemoteRepository,
    StageAllStep,
    Step,
    StepPlan,
)
from rigid.core.models.template import GeneratedFile, ScaffoldAnswers

__all__ = [
    # action.py
    "Action",
    # bootstrap.py
    "AddRemoteStep",
    "BootstrapContext",
    "BootstrapResult",
    "CommitStep",
    # template.py
    "GeneratedFile",
    "InitStep",
    "PushStep",
    "Receipt",
    "RemoteRepository",
    "ScaffoldAnswers",
    "StageAllStep",
    "Step",
    "StepPlan",
]
