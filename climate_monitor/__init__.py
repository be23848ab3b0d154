"""
Climate Monitor - device reading ingestion and alert evaluation service.
"""

__version__ = "0.1.0"
