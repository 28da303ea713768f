"""Supabase (PostgREST) submission source."""

from .connector import SupabaseConnector

__all__ = ["SupabaseConnector"]
