"""Resource group -> workspace -> model lookup -> conditional registration.

The run is an explicit sequence of steps. Each step returns a StepResult and
the first failing step ends the run; a step may also end it early with a
terminal success state (the model already being registered).
"""
import logging
from dataclasses import dataclass
from enum import Enum

from . import checks
from .errors import RegistrationError, RegistrationFailure, ResourceNotFoundError
from .params import InvocationParameters

logger = logging.getLogger(__name__)


class State(Enum):
    PARAMS_VALIDATED = "params_validated"
    RESOURCE_GROUP_CONFIRMED = "resource_group_confirmed"
    WORKSPACE_CONFIRMED = "workspace_confirmed"
    MODEL_CHECKED = "model_checked"
    ALREADY_REGISTERED = "already_registered"
    REGISTERED = "registered"
    REGISTRATION_FAILED = "registration_failed"


@dataclass(frozen=True)
class StepResult:
    ok: bool
    reason: RegistrationError | None = None
    state: State | None = None   # terminal state this step moved the run to, if any

    @classmethod
    def success(cls, state: State | None = None) -> "StepResult":
        return cls(ok=True, state=state)

    @classmethod
    def failure(cls, reason: RegistrationError, state: State | None = None) -> "StepResult":
        return cls(ok=False, reason=reason, state=state)


@dataclass(frozen=True)
class WorkflowResult:
    state: State
    error: RegistrationError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def confirm_resource_group(backend, p: InvocationParameters) -> StepResult:
    logger.info("🔹 Checking if resource group '%s' exists...", p.resource_group)
    if not checks.resource_group_exists(backend, p.resource_group):
        return StepResult.failure(
            ResourceNotFoundError(f"Resource group '{p.resource_group}' does not exist."))
    logger.info("✅ Resource group '%s' exists.", p.resource_group)
    return StepResult.success()


def confirm_workspace(backend, p: InvocationParameters) -> StepResult:
    logger.info("🔹 Checking if workspace '%s' exists in resource group '%s'...",
                p.workspace_name, p.resource_group)
    if not checks.workspace_exists(backend, p.workspace_name, p.resource_group):
        return StepResult.failure(ResourceNotFoundError(
            f"Workspace '{p.workspace_name}' does not exist in resource group '{p.resource_group}'."))
    logger.info("✅ Workspace '%s' exists in resource group '%s'.",
                p.workspace_name, p.resource_group)
    return StepResult.success()


def check_model(backend, p: InvocationParameters) -> StepResult:
    logger.info("🔹 Checking if model '%s' exists in workspace '%s'...",
                p.model_name, p.workspace_name)
    if checks.model_exists(backend, p.model_name, p.model_version,
                           p.workspace_name, p.resource_group):
        logger.info("✅ Model '%s' with version '%s' already exists in workspace '%s'.",
                    p.model_name, p.model_version, p.workspace_name)
        return StepResult.success(State.ALREADY_REGISTERED)
    return StepResult.success()


def register(backend, p: InvocationParameters) -> StepResult:
    logger.info("🔹 Registering model '%s' with version '%s' in workspace '%s'...",
                p.model_name, p.model_version, p.workspace_name)
    if not checks.register_model(backend, p):
        return StepResult.failure(
            RegistrationFailure(
                f"Model '{p.model_name}' with version '{p.model_version}' "
                f"could not be registered in workspace '{p.workspace_name}'."),
            State.REGISTRATION_FAILED,
        )
    logger.info("✅ Model '%s' with version '%s' registered in workspace '%s'.",
                p.model_name, p.model_version, p.workspace_name)
    return StepResult.success(State.REGISTERED)


STEPS = (
    (confirm_resource_group, State.RESOURCE_GROUP_CONFIRMED),
    (confirm_workspace, State.WORKSPACE_CONFIRMED),
    (check_model, State.MODEL_CHECKED),
)


def ensure_model_registered(params: InvocationParameters, backend) -> WorkflowResult:
    """Run every step in order against ``backend``; stop at the first failure or terminal state."""
    state = State.PARAMS_VALIDATED
    for step, next_state in STEPS:
        outcome = step(backend, params)
        if not outcome.ok:
            return WorkflowResult(outcome.state or state, outcome.reason)
        if outcome.state is not None:
            return WorkflowResult(outcome.state)
        state = next_state

    # Registration always ends the run, in REGISTERED or REGISTRATION_FAILED
    outcome = register(backend, params)
    return WorkflowResult(outcome.state, outcome.reason)
