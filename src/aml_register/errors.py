class RegistrationError(Exception):
    """Base class for fatal failures of a registration run."""


class MissingParameterError(RegistrationError):
    def __init__(self, missing):
        self.missing = list(missing)
        names = ", ".join(f"'{name}'" for name in self.missing)
        super().__init__(f"Missing required input(s): {names}.")


class ResourceNotFoundError(RegistrationError):
    """Resource group or workspace could not be confirmed."""


class RegistrationFailure(RegistrationError):
    """The create-model call did not succeed."""


class BackendConfigurationError(RegistrationError):
    """The selected registry backend cannot be built from the environment."""
