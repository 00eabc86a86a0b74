import pytest

from typedgeneric.base.config import ENV_VARIABLE
from typedgeneric.base.registry import default_registry


@pytest.fixture(autouse=True)
def _reset_registry():
    # get registry state before test execution
    global_signature_register = (
        default_registry.global_signature_register.copy()
    )

    # execute test
    yield

    # recover registry state
    default_registry.global_signature_register = global_signature_register


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # type checks are enabled unless a test disables them
    monkeypatch.delenv(ENV_VARIABLE, raising=False)
