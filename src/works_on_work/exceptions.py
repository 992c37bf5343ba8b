"""Centralized exceptions for the works-on-work site builder."""


class WorksOnWorkError(Exception):
    """Base exception for all works-on-work errors."""
