# services/__init__.py
"""Services package for the transport cost portal"""

from . import formatting
from . import logging_config
from . import settings

__all__ = ['formatting', 'logging_config', 'settings']
