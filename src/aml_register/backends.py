"""Registry backends.

A backend answers four questions about Azure state, each as a CommandResult:
does the resource group exist, does the workspace exist, does the model
version exist, and can the model version be created.
"""

from .errors import BackendConfigurationError
from .runner import CommandResult, run_command


BACKEND_CHOICES = ("cli", "sdk")


class AzCliBackend:
    """Drives the Azure CLI (``az`` with the ``ml`` extension)."""

    def __init__(self, runner=run_command, az_path: str = "az"):
        self.runner = runner
        self.az_path = az_path

    def _az(self, *args: str) -> CommandResult:
        return self.runner([self.az_path, *args])

    def show_resource_group(self, resource_group: str) -> CommandResult:
        return self._az("group", "show", "--name", resource_group)

    def show_workspace(self, workspace_name: str, resource_group: str) -> CommandResult:
        return self._az("ml", "workspace", "show",
                        "--name", workspace_name,
                        "--resource-group", resource_group)

    def show_model(self, model_name: str, model_version: str,
                   workspace_name: str, resource_group: str) -> CommandResult:
        return self._az("ml", "model", "show",
                        "--name", model_name,
                        "--version", model_version,
                        "--workspace-name", workspace_name,
                        "--resource-group", resource_group)

    def create_model(self, model_name: str, model_version: str, model_path: str,
                     model_type: str, workspace_name: str,
                     resource_group: str) -> CommandResult:
        return self._az("ml", "model", "create",
                        "--name", model_name,
                        "--version", model_version,
                        "--path", model_path,
                        "--workspace-name", workspace_name,
                        "--resource-group", resource_group,
                        "--type", model_type)


def build_backend(kind: str = "cli", az_path: str = "az", subscription_id=None, env=None):
    if kind == "cli":
        return AzCliBackend(az_path=az_path)
    if kind == "sdk":
        # Imported lazily so the CLI path works without loading the SDK
        from .sdk import MLClientBackend, resolve_subscription_id
        return MLClientBackend(resolve_subscription_id(subscription_id, env))
    raise BackendConfigurationError(f"Unknown backend '{kind}'. Choose one of: {', '.join(BACKEND_CHOICES)}")
