"""Persistence layer: engine/session management, ORM models and seed data."""
