"""
UI Package for Chat Client

This package provides the abstract UI adapter used by the controller and
its terminal realisation using the Textual framework.
"""

from .adapter import UIAdapter
from .app import ChatApp

__all__ = ["UIAdapter", "ChatApp"]
