"""Alexa skill for creating GitHub repositories by voice."""

__version__ = "0.1.0"
