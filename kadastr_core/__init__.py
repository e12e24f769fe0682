"""
kadastr_core
Cadastral value ingestion, classification and aggregation.
"""
__version__ = "1.0.0"
