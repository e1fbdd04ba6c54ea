"""
Usage text formatting
"""
from .usage_renderer import UsageRenderer, render
