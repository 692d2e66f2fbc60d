"""
svsyntax: lossless separated-values syntax

Parses comma, pipe and tab separated text into a syntax model that
prints back to exactly the original text.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Column types or decoding of field contents
    - Row-width validation
    - File formats beyond the separated-values syntax itself

This package defines SYNTAX only.

Decoding and other semantic layers consume this model unchanged.
"""

__version__ = "0.1.0"
