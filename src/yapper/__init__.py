# src/yapper/__init__.py

"""Yapper: a small interactive task manager with user-defined command aliases."""

__version__ = "0.1.0"
