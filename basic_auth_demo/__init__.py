"""
basic_auth_demo package initializer.
"""

from . import gate
from . import pages

__all__ = ["gate", "pages"]
