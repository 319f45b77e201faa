#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for plaintify."""
