"""Ensure a model version is registered in an Azure ML workspace."""

__version__ = "0.1.0"
