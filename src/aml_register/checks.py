"""The four leaf operations of a registration run.

Each one issues a single backend call and turns its CommandResult into a
boolean. Only exit status decides; output text is kept for diagnostics.
"""
import logging

from .params import InvocationParameters

logger = logging.getLogger(__name__)


def resource_group_exists(backend, resource_group: str) -> bool:
    result = backend.show_resource_group(resource_group)
    if result.ok:
        logger.info("✅ Resource group found. Output: %s", result.stdout.strip())
        return True
    logger.error("❌ Resource group not found or error occurred: %s",
                 result.diagnostic("no error output captured"))
    return False


def workspace_exists(backend, workspace_name: str, resource_group: str) -> bool:
    result = backend.show_workspace(workspace_name, resource_group)
    if result.ok:
        logger.info("✅ Workspace found. Output: %s", result.stdout.strip())
        return True
    logger.error("❌ Workspace not found or error occurred: %s",
                 result.diagnostic("no error output captured"))
    return False


def model_exists(backend, model_name: str, model_version: str,
                 workspace_name: str, resource_group: str) -> bool:
    result = backend.show_model(model_name, model_version, workspace_name, resource_group)
    if result.ok:
        logger.info("✅ Model found. Output: %s", result.stdout.strip())
        return True
    # Absence is the normal path to registration, not a fault
    logger.debug("Model lookup returned nothing: %s", result.diagnostic("no output"))
    return False


def register_model(backend, params: InvocationParameters) -> bool:
    logger.info("🔹 Model path: %s", params.model_path)
    result = backend.create_model(
        params.model_name,
        params.model_version,
        params.model_path,
        params.model_type,
        params.workspace_name,
        params.resource_group,
    )
    if result.ok:
        logger.info("✅ Model registered. Output: %s", result.stdout.strip())
        return True
    logger.error("❌ Model not registered or error occurred: %s",
                 result.diagnostic("no error output captured"))
    return False
