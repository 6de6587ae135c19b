# File: src/score_cutter/utils/__init__.py
"""Shared utilities for score_cutter."""

from .logging_config import TRACE_LEVEL, ScoreCutterLogger, get_logger

__all__ = ["TRACE_LEVEL", "ScoreCutterLogger", "get_logger"]
