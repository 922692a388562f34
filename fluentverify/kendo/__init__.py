"""
================================================================================
KendoUI Page Objects
================================================================================

Widget wrappers and demo page objects for the KendoUI component library.

================================================================================
"""

from .pages import KendoMultiSelectDemoPage
from .widgets import KendoMultiSelect, KendoMultiSelectOption

__all__ = [
    "KendoMultiSelect",
    "KendoMultiSelectOption",
    "KendoMultiSelectDemoPage",
]
