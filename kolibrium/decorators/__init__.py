"""
Search context decorators.

Decorators wrap drivers and elements to add behavior to every lookup:
highlighting, slowing down, logging or caching element state.
"""

from .base import AbstractDecorator, DecoratedContext, DecoratedElement, unwrap
from .highlighter import BorderStyle, Color, HighlighterDecorator
from .listeners import InteractionAware, InteractionListener, ListenerMultiplexer
from .logger import LoggerDecorator
from .manager import DecoratorManager, decorate_context, merge_decorators
from .slow_motion import SlowMotionDecorator
from .state_cache import ElementStateCacheDecorator

__all__ = [
    "AbstractDecorator",
    "DecoratedContext",
    "DecoratedElement",
    "unwrap",
    "BorderStyle",
    "Color",
    "HighlighterDecorator",
    "InteractionAware",
    "InteractionListener",
    "ListenerMultiplexer",
    "LoggerDecorator",
    "DecoratorManager",
    "decorate_context",
    "merge_decorators",
    "SlowMotionDecorator",
    "ElementStateCacheDecorator",
]
