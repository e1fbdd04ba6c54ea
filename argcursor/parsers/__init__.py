"""
Token consumption
"""
from .consumer import TokenConsumer
