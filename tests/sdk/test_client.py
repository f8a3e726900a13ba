"""Tests for SDK client (HTTP transport, auth, token refresh, serialization)."""

import json
import time

import pytest
from unittest.mock import patch, Mock

from tonal_mcp.sdk.client import TonalClient, TonalAPIError, TonalAuthError, UserInfo


def _response(status_code=200, body=None, text=""):
    response = Mock(status_code=status_code, ok=200 <= status_code < 300, text=text)
    response.content = json.dumps(body).encode() if body is not None else b""
    response.json = Mock(return_value=body)
    return response


def _logged_in_client(**token_state):
    client = TonalClient()
    client._id_token = token_state.get("id_token", "id-1")
    client._refresh_token = token_state.get("refresh_token", "refresh-1")
    client._expires_at = token_state.get("expires_at", time.time() + 3600)
    client._user_info = UserInfo(
        user_id="user-1", first_name="Test", last_name="Lifter", email="t@t.com",
    )
    return client


class TestTonalClientInit:
    def test_not_logged_in_initially(self):
        client = TonalClient()
        assert client.is_logged_in is False
        assert client.id_token is None
        assert client.user_info is None

    def test_user_id_requires_user_info(self):
        with pytest.raises(RuntimeError, match="User info not loaded"):
            TonalClient().user_id


class TestMakeRequest:
    def test_raises_when_not_logged_in(self):
        client = TonalClient()
        with pytest.raises(RuntimeError, match="Not logged in"):
            client.make_request("GET", "v6/movements")

    def test_sends_bearer_token(self):
        client = _logged_in_client(id_token="my_token")
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(body=[{"id": "mv-1"}])
            result = client.make_request("get", "v6/movements", params={"a": "1"})

        assert result == [{"id": "mv-1"}]
        args, kwargs = mock_request.call_args
        assert args == ("GET", "https://api.tonal.com/v6/movements")
        assert kwargs["headers"]["Authorization"] == "Bearer my_token"
        assert kwargs["params"] == {"a": "1"}

    def test_empty_body_returns_none(self):
        client = _logged_in_client()
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(status_code=204)
            assert client.make_request("DELETE", "v6/user-workouts/w-1") is None

    def test_raises_on_api_error(self):
        client = _logged_in_client()
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(status_code=500, text="server exploded")
            with pytest.raises(TonalAPIError, match="500") as exc_info:
                client.make_request("GET", "v6/movements")
        assert exc_info.value.status_code == 500

    def test_refreshes_and_retries_once_on_401(self):
        client = _logged_in_client()
        with patch.object(client._session, "request") as mock_request, \
                patch.object(client, "refresh_tokens") as mock_refresh:
            mock_request.side_effect = [_response(status_code=401), _response(body={"ok": True})]
            result = client.make_request("GET", "v6/users/userinfo")

        assert result == {"ok": True}
        mock_refresh.assert_called_once()
        assert mock_request.call_count == 2

    def test_second_401_raises_auth_error(self):
        client = _logged_in_client()
        with patch.object(client._session, "request") as mock_request, \
                patch.object(client, "refresh_tokens"):
            mock_request.return_value = _response(status_code=401)
            with pytest.raises(TonalAuthError):
                client.make_request("GET", "v6/users/userinfo")
        assert mock_request.call_count == 2

    def test_401_without_refresh_token_raises(self):
        client = _logged_in_client(refresh_token=None)
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(status_code=401)
            with pytest.raises(TonalAuthError):
                client.make_request("GET", "v6/users/userinfo")
        assert mock_request.call_count == 1

    def test_refreshes_expired_token_before_request(self):
        client = _logged_in_client(expires_at=time.time() - 1)
        with patch.object(client._session, "request") as mock_request, \
                patch.object(client, "refresh_tokens") as mock_refresh:
            mock_request.return_value = _response(body={})
            client.make_request("GET", "v6/movements")
        mock_refresh.assert_called_once()


class TestTokenRequest:
    def test_stores_tokens(self):
        client = TonalClient()
        with patch.object(client._session, "post") as mock_post:
            mock_post.return_value = _response(body={
                "id_token": "id-new", "refresh_token": "refresh-new", "expires_in": 3600,
            })
            client.token_request({"grant_type": "password"})

        assert client.id_token == "id-new"
        assert client._refresh_token == "refresh-new"
        assert client._expires_at > time.time()
        assert mock_post.call_args.kwargs["json"]["grant_type"] == "password"
        assert "client_id" in mock_post.call_args.kwargs["json"]

    def test_refresh_keeps_existing_refresh_token(self):
        client = _logged_in_client(refresh_token="keep-me")
        with patch.object(client._session, "post") as mock_post:
            mock_post.return_value = _response(body={"id_token": "id-2", "expires_in": 3600})
            client.refresh_tokens()

        assert client.id_token == "id-2"
        assert client._refresh_token == "keep-me"
        assert mock_post.call_args.kwargs["json"]["refresh_token"] == "keep-me"

    def test_refresh_reports_new_tokens(self):
        client = _logged_in_client()
        client.on_tokens_refreshed = Mock()
        with patch.object(client._session, "post") as mock_post:
            mock_post.return_value = _response(body={
                "id_token": "id-2", "refresh_token": "refresh-2", "expires_in": 3600,
            })
            client.refresh_tokens()

        (exported,), _ = client.on_tokens_refreshed.call_args
        assert json.loads(exported)["refresh_token"] == "refresh-2"

    def test_rejected_grant_raises(self):
        client = TonalClient()
        with patch.object(client._session, "post") as mock_post:
            mock_post.return_value = _response(
                status_code=403, body={"error_description": "Wrong email or password."},
            )
            with pytest.raises(TonalAuthError, match="Wrong email or password"):
                client.token_request({"grant_type": "password"})

    def test_refresh_without_token_raises(self):
        with pytest.raises(TonalAuthError, match="No refresh token"):
            TonalClient().refresh_tokens()


class TestTokenSerialization:
    def test_export_import_roundtrip(self):
        client = _logged_in_client(id_token="tok", refresh_token="ref", expires_at=123.0)

        exported = client.export_token()
        data = json.loads(exported)
        assert data["id_token"] == "tok"
        assert data["user_info"]["user_id"] == "user-1"

        client2 = TonalClient()
        client2.load_token(exported)
        assert client2.is_logged_in is True
        assert client2._refresh_token == "ref"
        assert client2._expires_at == 123.0
        assert client2.user_info.first_name == "Test"

    def test_export_raises_when_not_logged_in(self):
        with pytest.raises(RuntimeError, match="Not logged in"):
            TonalClient().export_token()
