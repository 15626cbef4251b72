"""Adapters – concrete queries, repositories and session stores, plus FastAPI glue."""
