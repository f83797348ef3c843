"""
Lumberjack UI Package - Textual terminal interface
"""
from .app import LumberjackApp, run_app

__all__ = [
    'LumberjackApp',
    'run_app',
]
