"""CLI package for Lending Library"""
from .main import cli

__all__ = ['cli']
