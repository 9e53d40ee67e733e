"""실제 uvicorn 서버 기동/종료 테스트"""

import socket
import threading
import time

import httpx
import pytest
import uvicorn

from app.frontend import HealthView, get_frontend_settings
from app.frontend.__main__ import main
from app.main import app


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def running_server():
    port = _free_port()
    server = uvicorn.Server(uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning"))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            pytest.fail("server did not start")
        time.sleep(0.05)

    yield server, thread, f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=10)


def test_health_over_network(running_server):
    _, _, base_url = running_server

    response = httpx.get(f"{base_url}/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_stopped_server_yields_connection_failure(running_server):
    """서버 종료 후에는 잘못된 응답이 아니라 연결 실패"""
    server, thread, base_url = running_server
    assert httpx.get(f"{base_url}/api/health").json()["status"] == "ok"

    server.should_exit = True
    thread.join(timeout=10)
    assert not thread.is_alive()

    with pytest.raises(httpx.ConnectError):
        httpx.get(f"{base_url}/api/health")


async def test_view_with_own_client(running_server):
    """주입된 클라이언트 없이 실제 서버 조회, 종료 후에는 Error"""
    server, thread, base_url = running_server

    assert await HealthView(base_url).mount() == "Backend health: ok"

    server.should_exit = True
    thread.join(timeout=10)

    assert await HealthView(base_url).mount() == "Backend health: Error"


def test_frontend_main_prints_health(running_server, monkeypatch, capsys):
    """python -m app.frontend 진입점"""
    _, _, base_url = running_server
    monkeypatch.setenv("VITE_API_BASE_URL", base_url)
    get_frontend_settings.cache_clear()

    try:
        main()
    finally:
        get_frontend_settings.cache_clear()

    assert capsys.readouterr().out == "Backend health: ok\n"
