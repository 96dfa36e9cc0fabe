"""Shared httpx plumbing for outbound integrations."""

from src.infrastructure.http.base_http_client import BaseHTTPClient

__all__ = ["BaseHTTPClient"]
