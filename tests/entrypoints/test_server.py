from __future__ import annotations

import socket
from typing import Iterator
from unittest.mock import patch

import pytest

from car_compare.entrypoints import server
from car_compare.entrypoints.server import PortInUseError, ensure_port_available, main


@pytest.fixture
def occupied_port() -> Iterator[tuple[str, int]]:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as holder:
        holder.bind(("127.0.0.1", 0))
        holder.listen(1)
        yield holder.getsockname()


def test_ensure_port_available_on_free_port() -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]

    ensure_port_available("127.0.0.1", port)


def test_ensure_port_available_on_taken_port(occupied_port: tuple[str, int]) -> None:
    host, port = occupied_port

    with pytest.raises(PortInUseError, match=f"Port {port}"):
        ensure_port_available(host, port)


def test_main_runs_uvicorn_with_configured_address(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAR_COMPARE_HOST", "127.0.0.1")
    monkeypatch.setenv("CAR_COMPARE_PORT", "5999")

    with (
        patch.object(server, "ensure_port_available") as mock_ensure,
        patch.object(server.uvicorn, "run") as mock_run,
    ):
        assert main() == 0

    mock_ensure.assert_called_once_with("127.0.0.1", 5999)
    mock_run.assert_called_once_with(
        "car_compare.entrypoints.http.app:app", host="127.0.0.1", port=5999
    )


def test_main_refuses_to_start_when_port_is_taken(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAR_COMPARE_PORT", raising=False)

    with (
        patch.object(
            server, "ensure_port_available", side_effect=PortInUseError("Port 5173 is taken")
        ),
        patch.object(server.uvicorn, "run") as mock_run,
    ):
        assert main() == 1

    mock_run.assert_not_called()
