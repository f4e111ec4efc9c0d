"""Breach Engine - HTTP API over the breach disclosure aggregation pipeline"""

__version__ = "1.0.0"
