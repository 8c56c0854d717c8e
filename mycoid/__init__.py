"""
mycoid: rule-based mushroom genus identification engine.

Research and education use only. The engine never decides whether a
specimen is safe to eat.
"""

__version__ = "0.1.0"
