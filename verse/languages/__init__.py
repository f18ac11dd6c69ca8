"""
Languages Package.

This package contains language-specific modules. Only Latin is scanned.
"""

# Import language modules for easier access
import verse.languages.latin

__all__ = ["latin"]
