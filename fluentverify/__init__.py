"""
================================================================================
Fluentverify
================================================================================

Fluent, fail-fast verifications for Selenium page objects.

Modules:
    - common: Shared configuration and logging utilities
    - framework: Verification chain, capabilities, page base and session
    - kendo: KendoUI widgets and demo page objects

Example:
    from fluentverify.framework import Session, VerificationError
    from fluentverify.kendo import KendoMultiSelectDemoPage

    with Session() as session:
        page = session.navigate_to(KendoMultiSelectDemoPage)
        page.movies.select("Taxi Driver").movies.option("Taxi Driver").verify_selected(True)

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "framework",
    "kendo",
]
