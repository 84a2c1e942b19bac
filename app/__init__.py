"""AIRM global search service."""
