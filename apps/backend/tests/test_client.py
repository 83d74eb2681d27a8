"""
Upstream client tests.

The requests session is replaced with a MagicMock so no network is used.
"""

import logging
from unittest.mock import MagicMock

import pytest
import requests

from tmdb_proxy.client import TMDBClient, TMDBError
from tmdb_proxy.config import Config, allowed_origins_from_env, log_dir_from_env


def make_response(status_code: int = 200, body=None, json_error: Exception = None):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body if body is not None else {}
    return response


@pytest.fixture
def config(tmp_path):
    return Config(api_key="secret", base_url="https://tmdb.test/3/", log_dir=tmp_path)


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(config, session):
    return TMDBClient(config, session=session)


class TestConfig:
    def test_trailing_slash_trimmed(self, config):
        assert config.base_url == "https://tmdb.test/3"

    def test_from_env_requires_api_key(self, monkeypatch, tmp_path):
        monkeypatch.delenv("TMDB_API_KEY", raising=False)
        with pytest.raises(ValueError):
            Config.from_env(env_path=str(tmp_path / "missing.env"))

    def test_from_env_reads_values(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TMDB_API_KEY", "abc")
        monkeypatch.setenv("TMDB_BASE_URL", "https://example.test/3/")
        monkeypatch.setenv("TMDB_TIMEOUT", "2.5")
        monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))

        config = Config.from_env(env_path=str(tmp_path / "missing.env"))

        assert config.api_key == "abc"
        assert config.base_url == "https://example.test/3"
        assert config.request_timeout == 2.5
        assert config.log_dir == tmp_path / "logs"

    def test_default_log_dir_follows_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_DIR", str(tmp_path))

        assert Config(api_key="abc").log_dir == tmp_path
        assert log_dir_from_env() == tmp_path

    @pytest.mark.parametrize("raw,expected", [
        ("http://a.test, http://b.test", ["http://a.test", "http://b.test"]),
        ("http://a.test,, ", ["http://a.test"]),
        ("", []),
    ])
    def test_allowed_origins(self, monkeypatch, raw, expected):
        monkeypatch.setenv("ALLOWED_ORIGINS", raw)

        assert allowed_origins_from_env() == expected


class TestFetch:
    def test_builds_url_and_injects_key_first(self, client, session):
        session.get.return_value = make_response(body={"id": 550})

        data = client.fetch("/movie/550", {"language": "en-US"})

        assert data == {"id": 550}
        url = session.get.call_args.args[0]
        params = session.get.call_args.kwargs["params"]
        assert url == "https://tmdb.test/3/movie/550"
        assert list(params) == ["api_key", "language"]
        assert params["api_key"] == "secret"
        assert session.get.call_args.kwargs["timeout"] == 10.0

    def test_leading_slash_optional(self, client, session):
        session.get.return_value = make_response(body={})

        client.fetch("movie/popular")

        assert session.get.call_args.args[0] == "https://tmdb.test/3/movie/popular"

    def test_no_params_sends_only_key(self, client, session):
        session.get.return_value = make_response(body={})

        client.fetch("/configuration")

        assert session.get.call_args.kwargs["params"] == {"api_key": "secret"}

    def test_logged_params_mask_api_key(self, client, session, caplog):
        session.get.return_value = make_response(body={})

        with caplog.at_level(logging.INFO, logger="tmdb_client"):
            client.fetch("/search/movie", {"query": "Heat"})

        sent = [r.getMessage() for r in caplog.records if r.name == "tmdb_client"]
        assert sent and "secret" not in sent[0]
        assert "'api_key': '***'" in sent[0]
        assert "'query': 'Heat'" in sent[0]
        assert session.get.call_args.kwargs["params"]["api_key"] == "secret"

    def test_error_message_hides_api_key(self, client, session):
        response = make_response(status_code=401)
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            "401 Client Error: for url: https://tmdb.test/3/movie/1?api_key=secret",
            response=response,
        )
        session.get.return_value = response

        with pytest.raises(TMDBError) as exc_info:
            client.fetch("/movie/1")

        assert "secret" not in str(exc_info.value)
        assert "api_key=***" in str(exc_info.value)

    @pytest.mark.parametrize("status_code", [401, 404, 500, 503])
    def test_non_2xx_raises_single_error_type(self, client, session, status_code):
        session.get.return_value = make_response(status_code=status_code)

        with pytest.raises(TMDBError) as exc_info:
            client.fetch("/movie/1")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.endpoint == "/movie/1"

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("down"),
        requests.exceptions.Timeout("slow"),
    ])
    def test_transport_errors_raise(self, client, session, error):
        session.get.side_effect = error

        with pytest.raises(TMDBError):
            client.fetch("/movie/1")

        assert session.get.call_count == 1  # no retries

    def test_malformed_body_raises(self, client, session):
        session.get.return_value = make_response(json_error=ValueError("bad json"))

        with pytest.raises(TMDBError):
            client.fetch("/movie/1")


class TestCredentialChecks:
    def test_validate_credentials_success(self, client, session):
        session.get.return_value = make_response(body={"success": True})

        assert client.validate_credentials() is True
        assert session.get.call_args.args[0].endswith("/authentication/token/new")

    def test_validate_credentials_failure(self, client, session):
        session.get.return_value = make_response(status_code=401)

        assert client.validate_credentials() is False

    def test_check_configuration_failure(self, client, session):
        session.get.side_effect = requests.exceptions.ConnectionError("down")

        assert client.check_configuration() is False
        assert session.get.call_args.args[0].endswith("/configuration")
