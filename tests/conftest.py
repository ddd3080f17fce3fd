import pytest

from impi import Verifier, VerificationScheme, VerifyOptions

LOCAL_PREFIX = "github.com/pavius/impi"


@pytest.fixture(scope="session")
def verifier() -> Verifier:
    return Verifier()


@pytest.fixture
def make_options():
    """Factory for VerifyOptions with the project-wide defaults of the test suite."""
    def _make(
        scheme: VerificationScheme = VerificationScheme.STD_LOCAL_THIRD_PARTY,
        local_prefix: str = LOCAL_PREFIX,
        ignore_generated: bool = False,
    ) -> VerifyOptions:
        return VerifyOptions(scheme=scheme, local_prefix=local_prefix, ignore_generated=ignore_generated)
    return _make


@pytest.fixture
def options(make_options) -> VerifyOptions:
    return make_options()
