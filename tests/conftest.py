"""Pytest fixtures running Pulumi programs against mocked resources."""

import pulumi
import pytest

from infra_edge.lib.aws.provider import use_provider
from edge_mocks import EdgeMocks


@pytest.fixture
def mocks():
    edge_mocks = EdgeMocks()
    pulumi.runtime.set_mocks(edge_mocks, preview=False)
    use_provider.cache_clear()

    yield edge_mocks

    use_provider.cache_clear()


@pytest.fixture
def run_program():
    """Run a function as a Pulumi program, waiting for every resource it registers, directly or in an apply."""

    def run(program):
        pulumi.runtime.test(program)()

    return run
