from __future__ import annotations

import os
from typing import Any, Mapping

import pydantic

# environment variable disabling generic type checks
ENV_VARIABLE = "PYTHON_GENERICS_DISABLE"

_FALSY = ("", "0", "false", "no", "off")


class GenericConfig(pydantic.BaseModel):
    """Generic Configuration Model

    Type checks cost time on every call of a generic. Once the type
    checks ran in a test pipeline they can be disabled, e.g. in
    production, by setting the `PYTHON_GENERICS_DISABLE` environment
    variable.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    # disable signature maps and type checks
    disabled: bool = False

    @pydantic.field_validator("disabled", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> Any:
        # accept environment style flags
        if isinstance(value, str):
            return value.strip().lower() not in _FALSY
        return value

    @property
    def enabled(self) -> bool:
        return not self.disabled

    @classmethod
    def from_env(
        cls, environ: None | Mapping[str, str] = None
    ) -> GenericConfig:
        """Create the configuration from the environment

        Arguments:
            environ (None | Mapping[str, str]):
                environment to read from, defaults to `os.environ`

        Returns:
            config (GenericConfig): the configuration
        """
        environ = os.environ if environ is None else environ
        return cls(disabled=environ.get(ENV_VARIABLE, ""))
