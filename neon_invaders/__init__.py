"""
Neon Invaders
-------------
Arcade shooter with a renderer-agnostic simulation core and a pygame host.
"""

__version__ = "0.1.0"
