"""Database engine, session and schema utilities."""
