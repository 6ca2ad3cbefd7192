"""
Shared utilities for TasbihKit.

Common building blocks consumed by the tasbihkit package:

- config: Settings via pydantic-settings
- logging: Structured logging via structlog
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses
- test_helpers: Dataset factories and fakes used by the test suite

Only test_helpers may import from tasbihkit.
"""
