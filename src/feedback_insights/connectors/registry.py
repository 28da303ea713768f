"""Lookup of submission sources by name."""

from typing import Type

from feedback_insights.connectors.base import BaseConnector
from feedback_insights.connectors.jsonfile import JsonFileConnector
from feedback_insights.connectors.supabase import SupabaseConnector


class ConnectorRegistry:
    """Maps source names (as used by the CLI) to connector classes."""

    _sources: dict[str, Type[BaseConnector]] = {
        SupabaseConnector.source_id: SupabaseConnector,
        JsonFileConnector.source_id: JsonFileConnector,
    }

    @classmethod
    def get(cls, name: str, **options) -> BaseConnector:
        """
        Instantiate the connector for a source name (case-insensitive).
        options go to the connector constructor, e.g. path for jsonfile.
        """
        connector_cls = cls._sources.get(name.lower())
        if connector_cls is None:
            raise ValueError(f"Unknown source: {name}. Available: {cls.available_sources()}")
        return connector_cls(**options)

    @classmethod
    def available_sources(cls) -> list[str]:
        return list(cls._sources)
