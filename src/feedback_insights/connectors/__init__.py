"""Submission sources."""

from feedback_insights.connectors.base import BaseConnector
from feedback_insights.connectors.registry import ConnectorRegistry

__all__ = ["BaseConnector", "ConnectorRegistry"]
