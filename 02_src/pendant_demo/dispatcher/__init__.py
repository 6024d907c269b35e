"""Dispatcher module."""

from .dispatcher import EventDispatcher, IEventDispatcher

__all__ = ["EventDispatcher", "IEventDispatcher"]
