"""Collector HTTP service."""

from baseline_audit.server.app import create_app

__all__ = ["create_app"]
