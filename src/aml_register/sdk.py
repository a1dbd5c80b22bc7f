import os

from azure.core.exceptions import AzureError
from azure.ai.ml import MLClient
from azure.ai.ml.entities import Model
from azure.ai.ml.exceptions import MlException
from azure.identity import DefaultAzureCredential

from .errors import BackendConfigurationError
from .runner import CommandResult

SUBSCRIPTION_ENV_VARS = (
    "AZURE_SUBSCRIPTION_ID",
    # These are injected by AzureML into job containers
    "AZUREML_ARM_SUBSCRIPTION",
    "AZUREML_SUBSCRIPTION_ID",
)


def resolve_subscription_id(explicit: str | None = None, env=None) -> str:
    env = os.environ if env is None else env
    if explicit and explicit.strip():
        return explicit.strip()
    for name in SUBSCRIPTION_ENV_VARS:
        value = (env.get(name) or "").strip()
        if value:
            return value
    raise BackendConfigurationError(
        "Could not resolve the Azure subscription id. "
        f"Pass --subscription-id or set one of: {', '.join(SUBSCRIPTION_ENV_VARS)}."
    )


def _failed(e: Exception) -> CommandResult:
    return CommandResult(stderr=str(e) or type(e).__name__, returncode=1)


class MLClientBackend:
    """Same four operations as the CLI backend, through the Azure ML Python SDK."""

    def __init__(self, subscription_id: str, credential=None, client_factory=MLClient):
        self.subscription_id = subscription_id
        self._credential = credential
        self._client_factory = client_factory

    @property
    def credential(self):
        if self._credential is None:
            # Federated credentials (OIDC in Actions) or SP if configured
            self._credential = DefaultAzureCredential(exclude_interactive_browser_credential=True)
        return self._credential

    def _client(self, resource_group: str, workspace_name: str | None = None) -> MLClient:
        return self._client_factory(
            credential=self.credential,
            subscription_id=self.subscription_id,
            resource_group_name=resource_group,
            workspace_name=workspace_name,
        )

    def show_resource_group(self, resource_group: str) -> CommandResult:
        # Listing workspaces is scoped to the resource group, so a missing
        # group surfaces as ResourceGroupNotFound.
        try:
            workspaces = list(self._client(resource_group).workspaces.list(scope="resource_group"))
        except (AzureError, MlException) as e:
            return _failed(e)
        names = [ws.name for ws in workspaces]
        return CommandResult(stdout=f"resource group '{resource_group}' "
                                    f"(workspaces: {', '.join(names) or 'none'})",
                             returncode=0)

    def show_workspace(self, workspace_name: str, resource_group: str) -> CommandResult:
        try:
            ws = self._client(resource_group).workspaces.get(workspace_name)
        except (AzureError, MlException) as e:
            return _failed(e)
        return CommandResult(stdout=str(ws), returncode=0)

    def show_model(self, model_name: str, model_version: str,
                   workspace_name: str, resource_group: str) -> CommandResult:
        try:
            model = self._client(resource_group, workspace_name).models.get(
                name=model_name, version=model_version)
        except (AzureError, MlException) as e:
            return _failed(e)
        return CommandResult(stdout=str(model), returncode=0)

    def create_model(self, model_name: str, model_version: str, model_path: str,
                     model_type: str, workspace_name: str,
                     resource_group: str) -> CommandResult:
        model = Model(
            name=model_name,
            version=model_version,
            path=model_path,
            type=model_type,
            tags={"source": "pipeline"},
        )
        try:
            created = self._client(resource_group, workspace_name).models.create_or_update(model)
        except (AzureError, MlException) as e:
            return _failed(e)
        return CommandResult(stdout=f"{created.name} v{created.version}", returncode=0)
