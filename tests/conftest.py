"""Pytest configuration and fixtures."""

import pytest

from aml_register.params import InvocationParameters
from aml_register.runner import CommandResult

OK = CommandResult(stdout="{}", returncode=0)
NOT_FOUND = CommandResult(stderr="ResourceNotFound", returncode=1)


class FakeBackend:
    """Records every call; answers from per-operation CommandResults."""

    def __init__(self, resource_group=OK, workspace=OK, model=NOT_FOUND, create=OK):
        self.results = {
            "show_resource_group": resource_group,
            "show_workspace": workspace,
            "show_model": model,
            "create_model": create,
        }
        self.calls = []

    def _answer(self, op, *args):
        self.calls.append((op, args))
        return self.results[op]

    def show_resource_group(self, resource_group):
        return self._answer("show_resource_group", resource_group)

    def show_workspace(self, workspace_name, resource_group):
        return self._answer("show_workspace", workspace_name, resource_group)

    def show_model(self, model_name, model_version, workspace_name, resource_group):
        return self._answer("show_model", model_name, model_version,
                            workspace_name, resource_group)

    def create_model(self, model_name, model_version, model_path, model_type,
                     workspace_name, resource_group):
        return self._answer("create_model", model_name, model_version, model_path,
                            model_type, workspace_name, resource_group)

    def ops(self):
        return [op for op, _ in self.calls]


class InMemoryRegistry(FakeBackend):
    """A backend whose model lookup sees models created earlier."""

    def __init__(self):
        super().__init__()
        self.models = set()

    def show_model(self, model_name, model_version, workspace_name, resource_group):
        self.calls.append(("show_model", (model_name, model_version, workspace_name, resource_group)))
        if (model_name, model_version) in self.models:
            return OK
        return NOT_FOUND

    def create_model(self, model_name, model_version, model_path, model_type,
                     workspace_name, resource_group):
        self.calls.append(("create_model", (model_name, model_version, model_path,
                                            model_type, workspace_name, resource_group)))
        self.models.add((model_name, model_version))
        return OK


@pytest.fixture
def params():
    return InvocationParameters(
        resource_group="rg-ml",
        workspace_name="ws-ml",
        model_name="resnet",
        model_version="3",
        model_path="outputs/model",
        model_type="custom_model",
    )


@pytest.fixture
def action_env():
    """Inputs as the Actions runner exports them."""
    return {
        "INPUT_RESOURCE-GROUP": "rg-ml",
        "INPUT_WORKSPACE-NAME": "ws-ml",
        "INPUT_MODEL-NAME": "resnet",
        "INPUT_MODEL-VERSION": "3",
        "INPUT_MODEL-PATH": "outputs/model",
        "INPUT_MODEL-TYPE": "custom_model",
    }


@pytest.fixture
def found():
    return OK


@pytest.fixture
def not_found():
    return NOT_FOUND


@pytest.fixture
def make_backend():
    """Factory for FakeBackend; keyword arguments override per-operation results."""
    return FakeBackend


@pytest.fixture
def registry():
    return InMemoryRegistry()
