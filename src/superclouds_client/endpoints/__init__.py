"""Endpoint clients for the Superclouds API."""

from superclouds_client.endpoints.users import UsersClient

__all__ = ["UsersClient"]
