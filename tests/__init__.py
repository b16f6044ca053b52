"""Test suite for Version Tag Parser.

This package contains test modules and fixtures for verifying the functionality
of the Version Tag Parser. It includes tests for:
- Scheme recognizers and auto-detection
- Calendar plausibility rules
- Git tag lookup
- Output emission and the action entry point

The test suite uses pytest and provides fixtures for common test scenarios.
"""
