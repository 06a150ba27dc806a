"""ContainerEnginePort implementation over the docker SDK."""

import asyncio
from typing import Any, Callable, List

import docker
import requests
from docker.errors import DockerException

from dockerbot.domain.models import ContainerSummary
from dockerbot.ports.outbound import EngineError

# Deadlines (seconds) for each engine call.
LIST_DEADLINE = 30.0
START_DEADLINE = 30.0
STOP_DEADLINE = 30.0
RESTART_DEADLINE = 60.0
LOGS_DEADLINE = 30.0

# HTTP timeout for the underlying client; never shorter than any deadline.
CLIENT_TIMEOUT = 60


def create_docker_client() -> docker.DockerClient:
    """Build a client from DOCKER_HOST and friends, negotiating the API version.

    Raises docker.errors.DockerException when the daemon is unreachable.
    """
    return docker.from_env(timeout=CLIENT_TIMEOUT)


class DockerEngine:
    """Async wrapper around docker.DockerClient.

    Blocking SDK calls run in worker threads, each bounded by its own
    deadline. Every failure surfaces as EngineError; nothing is retried.
    """

    def __init__(self, client: docker.DockerClient):
        self._client = client

    async def _call(self, what: str, deadline: float, func: Callable[..., Any], *args, **kwargs) -> Any:
        try:
            return await asyncio.wait_for(asyncio.to_thread(func, *args, **kwargs), timeout=deadline)
        except asyncio.TimeoutError:
            raise EngineError(f"{what}: timed out after {deadline:.0f}s") from None
        except (DockerException, requests.exceptions.RequestException) as e:
            raise EngineError(f"{what}: {e}") from e

    async def list_containers(self) -> List[ContainerSummary]:
        items = await self._call("list containers", LIST_DEADLINE, self._client.api.containers, all=True)
        return [ContainerSummary.from_api(item) for item in items]

    async def start_container(self, container_id: str) -> None:
        await self._call("start container", START_DEADLINE, self._client.api.start, container_id)

    async def stop_container(self, container_id: str, timeout: int) -> None:
        await self._call("stop container", STOP_DEADLINE, self._client.api.stop, container_id, timeout=timeout)

    async def restart_container(self, container_id: str, timeout: int) -> None:
        await self._call(
            "restart container", RESTART_DEADLINE, self._client.api.restart, container_id, timeout=timeout,
        )

    async def container_logs(self, container_id: str, tail: int) -> bytes:
        return await self._call("container logs", LOGS_DEADLINE, self._fetch_raw_logs, container_id, tail)

    def _fetch_raw_logs(self, container_id: str, tail: int) -> bytes:
        # APIClient.logs() demultiplexes the stream; read the framed payload as sent.
        api = self._client.api
        url = f"{api.base_url}/v{api.api_version}/containers/{container_id}/logs"
        params = {
            "stdout": 1,
            "stderr": 1,
            "timestamps": 1,
            "follow": 0,
            "tail": str(tail),
        }
        response = api.get(url, params=params, timeout=CLIENT_TIMEOUT)
        response.raise_for_status()
        return response.content
