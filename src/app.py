"""Application composition root.

This module wires together configuration and the two outbound collaborators (model gateway and
GraphQL executor) for the bot and CLI runtimes.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config.settings import Settings
from src.gql.executor import GraphExecutor, GraphQLConfig
from src.intent.llm_gateway import LLMConfig, ModelGateway


@dataclass(frozen=True)
class App:
    """Shared, immutable application dependencies for handlers."""

    settings: Settings
    gateway: ModelGateway
    executor: GraphExecutor


def create_app(settings: Settings) -> App:
    """Create the application container."""

    gateway = ModelGateway(
        LLMConfig(
            host=settings.ollama_host,
            model=settings.ollama_model,
            timeout_s=settings.llm_timeout_s,
        )
    )
    executor = GraphExecutor(
        GraphQLConfig(url=settings.graphql_url, timeout_s=settings.graphql_timeout_s)
    )
    return App(settings=settings, gateway=gateway, executor=executor)
