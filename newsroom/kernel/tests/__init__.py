"""Kernel test suite. Each module covers one store; test_site covers the wiring."""
