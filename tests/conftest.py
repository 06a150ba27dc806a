"""Shared mock ports for router and gateway tests."""

import pytest

from dockerbot.domain.models import ContainerState, ContainerSummary
from dockerbot.ports.outbound import EngineError

WEB_ID = "abcdef1234567890" * 4
DB_ID = "0123456789ab" + "f" * 52


class MockEngine:
    """In-memory ContainerEnginePort recording every call."""

    def __init__(self, containers=None, logs=b""):
        self.containers = list(containers or [])
        self.logs = logs
        self.calls = []
        self.fail = set()  # method names that raise EngineError

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail:
            raise EngineError(f"{name} failed")

    def called(self, name):
        return [c for c in self.calls if c[0] == name]

    async def list_containers(self):
        self._record("list_containers")
        return list(self.containers)

    async def start_container(self, container_id):
        self._record("start_container", container_id)

    async def stop_container(self, container_id, timeout):
        self._record("stop_container", container_id, timeout)

    async def restart_container(self, container_id, timeout):
        self._record("restart_container", container_id, timeout)

    async def container_logs(self, container_id, tail):
        self._record("container_logs", container_id, tail)
        return self.logs


class MockNotification:
    """NotificationPort that stores replies instead of sending them."""

    def __init__(self):
        self.sent = []

    async def send(self, reply):
        self.sent.append(reply)


def make_container(name="web", container_id=WEB_ID, state=ContainerState.RUNNING,
                   status="Up 2 hours", image="nginx:latest"):
    return ContainerSummary(
        id=container_id,
        names=(f"/{name}",),
        state=state,
        status=status,
        image=image,
    )


def frame(text, stream=1):
    """Encode one log line the way the engine multiplexes it."""
    payload = text.encode("utf-8") + b"\n"
    return bytes([stream, 0, 0, 0]) + len(payload).to_bytes(4, "big") + payload


@pytest.fixture
def web():
    return make_container()


@pytest.fixture
def db():
    return make_container(name="db", container_id=DB_ID, state=ContainerState.EXITED,
                          status="Exited (0) 3 days ago", image="postgres:16")


@pytest.fixture
def engine(web, db):
    return MockEngine(containers=[web, db])


@pytest.fixture
def notification():
    return MockNotification()


@pytest.fixture
def container_factory():
    return make_container


@pytest.fixture
def log_frame():
    return frame
