"""Kalkulator Bulat package: integer expression parser, evaluator and CLI."""

__all__ = [
    "config",
    "parser",
    "evaluator",
    "variables",
    "engine",
    "cli",
    "types",
    "logging_config",
]
