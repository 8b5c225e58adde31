"""SQL backend: declarative models and the engine/session factories."""

from .session import Base, build_engine, build_sessionmaker

__all__ = ["Base", "build_engine", "build_sessionmaker"]
