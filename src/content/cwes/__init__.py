"""CWE detail pages, one module per category.

``CWE_PAGES`` lists every page in the order the categories present them.
"""

from src.content.cwes import (
    algorithms,
    authentication,
    certificates,
    data_exposure,
    data_integrity,
    encryption,
    key_management,
    randomness,
)

CWE_PAGES = (
    *encryption.PAGES,
    *key_management.PAGES,
    *randomness.PAGES,
    *certificates.PAGES,
    *data_exposure.PAGES,
    *authentication.PAGES,
    *data_integrity.PAGES,
    *algorithms.PAGES,
)

__all__ = ["CWE_PAGES"]
