import json

import pytest
from click.testing import CliRunner

from infra_edge.lib.cli import cli
from infra_edge.lib.links import ENV_PREFIX, ResourceLinks


@pytest.fixture(autouse=True)
def linked_resources(monkeypatch):
    links = ResourceLinks(
        environ={f"{ENV_PREFIX}Site": json.dumps({"url": "https://example.com"})},
        links={"Bucket": {"name": "my-bucket"}},
    )
    monkeypatch.setattr(cli, "Resource", links)


@pytest.fixture
def runner():
    return CliRunner()


def test_list(runner):
    result = runner.invoke(cli.cli, ["list"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["Bucket", "Site"]


def test_get(runner):
    result = runner.invoke(cli.cli, ["get", "Site"])

    assert result.exit_code == 0
    assert result.output.startswith("Site: ")
    assert '"url": "https://example.com"' in result.output


def test_get_raw(runner):
    result = runner.invoke(cli.cli, ["get", "--raw", "Bucket"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"name": "my-bucket"}


def test_get_not_linked(runner):
    result = runner.invoke(cli.cli, ["get", "Queue"])

    assert result.exit_code == 1
    assert 'Error: "Queue" is not linked' in result.output


def test_debug(runner):
    result = runner.invoke(cli.cli, ["--debug", "list"])

    assert result.exit_code == 0
    assert "Enabled debug mode!" in result.output
