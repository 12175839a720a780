"""Persistence layer: ORM tables, engine handling and per-resource data access."""
