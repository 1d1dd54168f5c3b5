"""
Test suite for MarkQuill.

This module contains all unit tests for the markquill package.
"""
