"""Binding engine: table, event dispatcher, framework and read cycle."""

from .bindings import BindingTable
from .dispatcher import EventDispatcher, EventHandler, raise_execution_error
from .framework import Framework
from .refresher import Refresher

__all__ = [
    "BindingTable",
    "EventDispatcher",
    "EventHandler",
    "Framework",
    "Refresher",
    "raise_execution_error",
]
