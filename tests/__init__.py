# SHA2Vault Test Suite
"""
Test suite including:
- Unit tests for each SHA-2 stage
- Security tests (invalid inputs, avalanche, reference agreement)
- Integration tests (CLI, configuration, self-test)

Run with: pytest
"""
