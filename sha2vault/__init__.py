"""
SHA2Vault - SHA-224 and SHA-256 implemented from scratch.
"""

from .core_crypto.sha2 import (
    compute_digest,
    hexdigest,
    sha224,
    sha224_hex,
    sha224_string,
    sha256,
    sha256_hex,
    sha256_string,
)
from .core_crypto.state import (
    ConfigurationError,
    UnsupportedVariantError,
    Variant,
)

__version__ = "0.1.0"

__all__ = [
    'compute_digest',
    'hexdigest',
    'sha224',
    'sha224_hex',
    'sha224_string',
    'sha256',
    'sha256_hex',
    'sha256_string',
    'ConfigurationError',
    'UnsupportedVariantError',
    'Variant',
    '__version__',
]
