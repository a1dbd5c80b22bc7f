from dataclasses import dataclass, fields

from .errors import MissingParameterError


@dataclass(frozen=True)
class InvocationParameters:
    resource_group: str
    workspace_name: str
    model_name: str
    model_version: str
    model_path: str
    model_type: str


def input_name(field_name: str) -> str:
    """``model_path`` -> ``model-path`` (the name the pipeline knows the input by)."""
    return field_name.replace("_", "-")


INPUT_NAMES = tuple(input_name(f.name) for f in fields(InvocationParameters))


def resolve_parameters(values: dict) -> InvocationParameters:
    """
    Build the run parameters from raw input values keyed by input name.

    Values that are missing, None or blank count as absent. Every absent
    input is reported in a single MissingParameterError.
    """
    resolved = {}
    missing = []
    for f in fields(InvocationParameters):
        raw = values.get(input_name(f.name))
        value = raw.strip() if isinstance(raw, str) else raw
        if not value:
            missing.append(input_name(f.name))
            continue
        resolved[f.name] = value

    if missing:
        raise MissingParameterError(missing)
    return InvocationParameters(**resolved)
