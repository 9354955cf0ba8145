#!/usr/bin/env python3
"""A CLI for the vitotrol library."""

from __future__ import annotations
