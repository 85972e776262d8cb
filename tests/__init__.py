"""
Test suite for pynoisemap package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for the permutation table, kernels, compositor, field and CLI
- Integration tests for complete generation workflows

Run with: pytest
"""
