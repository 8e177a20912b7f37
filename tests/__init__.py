"""
Test suite for the special prices catalog.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run API tests: pytest tests/test_api.py -v
"""
