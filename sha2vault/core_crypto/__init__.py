# Core Cryptography Module
"""
From-scratch SHA-2 (32-bit word) building blocks:
- Word helpers (big-endian codec, rotation, modular addition)
- Message padding and block splitting
- Message schedule expansion
- Compression function and round constants
- Digest state and variants (SHA-224, SHA-256)
"""
