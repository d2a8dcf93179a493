import json
import logging
import shutil

import httpx

from webapp_publisher.bootstrap import ServiceContainer
from webapp_publisher.main import main
from webapp_publisher.modules.deployment.deploy import KuduDeployTarget
from webapp_publisher.modules.deployment.domain import ResourceMapping
from webapp_publisher.settings import Settings


def _build_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults():
    settings = _build_settings()

    assert settings.max_retry_attempts == 3
    assert settings.excluded_entry == "local.settings.json"
    assert settings.resources == []


def test_resources_and_retry_read_from_environment(monkeypatch, tmp_path):
    payload = [{"directory": str(tmp_path), "includes": ["*.war"], "target_path": "api"}]
    monkeypatch.setenv("WEBAPP_PUBLISHER_RESOURCES", json.dumps(payload))
    monkeypatch.setenv("WEBAPP_PUBLISHER_MAX_RETRY_ATTEMPTS", "5")
    monkeypatch.setenv("WEBAPP_PUBLISHER_SCM_URL", "https://demo.scm.example.net")

    settings = _build_settings()

    assert settings.resources == [ResourceMapping(directory=str(tmp_path), includes=["*.war"], target_path="api")]
    assert settings.max_retry_attempts == 5
    assert settings.scm_url == "https://demo.scm.example.net"


def test_container_wires_settings(tmp_path):
    settings = _build_settings(max_retry_attempts=4, staging_prefix="pfx-", scm_url="https://x.scm.example.net")
    container = ServiceContainer(settings)

    assert container.invoker.max_attempts == 4
    assert container.stager.prefix == "pfx-"
    target = container.build_target()
    assert isinstance(target, KuduDeployTarget)
    target.close()


def test_container_run_with_explicit_target(tmp_path):
    source = tmp_path / "site"
    source.mkdir()
    (source / "index.html").write_text("<html/>")
    settings = _build_settings(resources=[ResourceMapping(directory=str(source))])
    uploads = []

    def handler(request: httpx.Request) -> httpx.Response:
        uploads.append(request.url.path)
        return httpx.Response(200)

    target = KuduDeployTarget(
        "https://demo.scm.example.net",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )

    records = ServiceContainer(settings).run(target)

    assert uploads == ["/api/zipdeploy"]
    assert records[0].success


def test_main_returns_error_code_without_resources(caplog, monkeypatch):
    monkeypatch.setattr("webapp_publisher.main.configure_logging", lambda level: None)
    caplog.set_level(logging.ERROR)

    assert main(_build_settings(scm_url="https://demo.scm.example.net")) == 1
    assert any("<resources>" in record.getMessage() for record in caplog.records)


def test_main_returns_error_code_without_endpoint(tmp_path, monkeypatch):
    monkeypatch.setattr("webapp_publisher.main.configure_logging", lambda level: None)
    source = tmp_path / "site"
    source.mkdir()
    (source / "index.html").write_text("<html/>")

    assert main(_build_settings(resources=[ResourceMapping(directory=str(source))])) == 1


def test_main_returns_error_code_on_filesystem_failure(tmp_path, monkeypatch):
    monkeypatch.setattr("webapp_publisher.main.configure_logging", lambda level: None)
    source = tmp_path / "site"
    source.mkdir()
    (source / "index.html").write_text("<html/>")

    def _denied(src, dst, **kwargs):
        raise PermissionError(13, "Permission denied", str(dst))

    monkeypatch.setattr(shutil, "copy2", _denied)
    settings = _build_settings(
        scm_url="https://demo.scm.example.net",
        staging_prefix="pfx-",
        resources=[ResourceMapping(directory=str(source))],
    )

    assert main(settings) == 1
