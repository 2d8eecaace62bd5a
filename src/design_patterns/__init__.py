"""Design Patterns Catalogue - Root Package.

Minimal, self-contained examples of the classic object-oriented design
patterns, each driven by a demo routine that emits illustrative output.

Key Components:
    - creational: Singleton, Factory Method, Abstract Factory, Builder, Prototype
    - structural: Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy
    - behavioral: Chain of Responsibility, Command, Iterator, Mediator, Memento,
      Observer, State, Strategy, Template Method, Visitor
    - demos: demo routines and the registry that runs them
    - infrastructure: logging, output sinks and singleton helpers
    - config: typed configuration

Usage:
    >>> design-patterns                      # run every demo
    >>> design-patterns --category structural
    >>> python -m design_patterns --list
"""

from ._package import PACKAGE_NAME
from ._version import __version__

__package_name__ = PACKAGE_NAME

__all__ = ["__version__", "__package_name__"]
