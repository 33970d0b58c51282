import pytest

from infra_edge.lib.config import EdgeConfigException
from infra_edge.lib.config.edge_env import HierarchicalConfig


@pytest.fixture
def repository(tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / "Edge.common.yaml").write_text("namespace: ex\nteam: web\nphase: dev\n")

    sysenv = tmp_path / "sysenvs" / "aws" / "ex-aws-us-east-1-sandbox-prod"
    sysenv.mkdir(parents=True)
    (sysenv / "Edge.common.yaml").write_text("phase: prod\n")

    return tmp_path


class TestHierarchicalConfig:
    def test_closest_file_wins(self, repository):
        config = HierarchicalConfig(start=repository / "sysenvs" / "aws" / "ex-aws-us-east-1-sandbox-prod")

        assert config["phase"] == "prod"
        assert config["namespace"] == "ex"
        assert config["team"] == "web"

    def test_stops_at_the_repository_root(self, tmp_path):
        (tmp_path / "Edge.common.yaml").write_text("purpose: outside\n")
        repository = tmp_path / "infra"
        (repository / ".git").mkdir(parents=True)
        (repository / "Edge.common.yaml").write_text("phase: dev\n")

        config = HierarchicalConfig(start=repository / "sysenvs")

        assert config["phase"] == "dev"
        assert "purpose" not in config

    def test_limit(self, repository):
        config = HierarchicalConfig(start=repository / "sysenvs" / "aws" / "ex-aws-us-east-1-sandbox-prod", limit=1)

        assert dict(config) == {"phase": "prod"}

    def test_no_config(self, tmp_path):
        (tmp_path / ".git").mkdir()

        assert dict(HierarchicalConfig(start=tmp_path)) == {}

    def test_require(self, repository):
        config = HierarchicalConfig(start=repository)

        assert config.require("team") == "web"

        with pytest.raises(EdgeConfigException, match="'purpose'"):
            config.require("purpose")
