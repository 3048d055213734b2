"""Tests for the command line entry point."""
import json
from importlib import import_module

import httpx
import pytest

from directus_typegen.runtime.directus_client import DirectusClient

from test_pipeline import EXPECTED

cli_main = import_module("directus_typegen.cli.main")


@pytest.fixture
def server(monkeypatch, collections_payload, fields_payload, relations_payload):
    """Route the CLI's client to an in-memory Directus and record requests."""
    state = {"seen": [], "status": 200, "bodies": {}}

    def handler(request: httpx.Request) -> httpx.Response:
        state["seen"].append(request)
        if state["status"] != 200:
            return httpx.Response(state["status"], json={"errors": [{"message": "boom"}]})
        bodies = {
            "/auth/login": {"data": {"access_token": "abc123"}},
            "/collections": {"data": collections_payload},
            "/fields": {"data": fields_payload},
            "/relations": {"data": relations_payload},
            "/server/specs/oas": {"openapi": "3.0.1"},
        }
        bodies.update(state["bodies"])
        return httpx.Response(200, json=bodies[request.url.path])

    def client_factory(host, timeout=30.0):
        return DirectusClient(host, timeout=timeout, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli_main, "DirectusClient", client_factory)
    monkeypatch.setattr(cli_main, "configure_logging", lambda verbose=False: None)
    return state


def test_generates_file(server, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    code = cli_main.app(["--host", "http://directus.test", "--email", "a@example.com", "--password", "secret"])

    assert code == 0
    assert (tmp_path / "directus.ts").read_text(encoding="utf-8") == EXPECTED
    assert [r.url.path for r in server["seen"]] == ["/auth/login", "/collections", "/fields", "/relations"]


def test_options_and_spec_file(server, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    code = cli_main.app([
        "--token", "static",
        "--typeName", "MyCollections",
        "--out-file", "out/types.ts",
        "--spec-out-file", "out/spec.json",
        "--legacy",
    ])

    assert code == 0
    output = (tmp_path / "out" / "types.ts").read_text(encoding="utf-8")
    assert "export type MyCollections = {" in output
    assert "CollectionNames" not in output
    assert json.loads((tmp_path / "out" / "spec.json").read_text()) == {"openapi": "3.0.1"}
    assert server["seen"][0].headers["authorization"] == "Bearer static"


def test_config_file(server, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "typegen.yaml").write_text("token: static\ntypeName: FromYaml\n")

    code = cli_main.app(["--config", "typegen.yaml", "--type-name", "FromFlag"])

    assert code == 0
    assert "export type FromFlag = {" in (tmp_path / "directus.ts").read_text(encoding="utf-8")


def test_missing_credentials(server, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert cli_main.app([]) == 1
    assert server["seen"] == []
    assert not (tmp_path / "directus.ts").exists()


def test_server_error(server, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    server["status"] = 401

    assert cli_main.app(["--email", "a@example.com", "--password", "wrong"]) == 1
    assert not (tmp_path / "directus.ts").exists()


def test_malformed_response(server, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    server["bodies"]["/fields"] = ["not", "an", "object"]

    assert cli_main.app(["--token", "static"]) == 1
    assert not (tmp_path / "directus.ts").exists()


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli_main.app(["--version"])
    assert exc_info.value.code == 0
    assert "directus-typegen" in capsys.readouterr().out
