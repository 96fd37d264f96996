"""Centralized exceptions for quire."""


class QuireError(Exception):
    """Base exception for all quire errors."""
