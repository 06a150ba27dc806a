"""Docker adapter: ContainerEnginePort implementation."""

from dockerbot.adapters.docker.engine import DockerEngine, create_docker_client

__all__ = ["DockerEngine", "create_docker_client"]
