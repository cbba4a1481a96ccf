"""
Tests for payments app.

This package contains test modules for:
- test_models.py: WebhookEvent notification log tests
- test_registry.py: Gateway registry tests

Adapter, gateway and webhook tests live beside their packages.

Usage:
    pytest payments/
    pytest payments/tests/test_registry.py
"""
