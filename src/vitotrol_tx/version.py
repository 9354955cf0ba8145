#!/usr/bin/env python3
"""Vitotrol - a client for the Viessmann Vitotrol SOAP service."""

__version__ = "0.1.0"
VERSION = __version__
