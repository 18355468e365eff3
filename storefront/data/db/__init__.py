"""Database module for relational store operations."""

from storefront.data.db.connection import DatabaseConnection, db_connection

__all__ = ["DatabaseConnection", "db_connection"]
