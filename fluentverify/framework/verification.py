"""
================================================================================
Verification Chain
================================================================================

Fail-fast, chainable checks over page objects and element wrappers.

Every verification either returns the value it was given (the same object,
so further checks can follow) or raises ``VerificationError``. There is no
soft mode and no aggregation: the first failing check aborts the chain.

Usage:
    from fluentverify.framework.verification import verify, verify_text

    verify_text(page.title_block, "Basic usage")
    verify(page, lambda p: p.movies.selected_texts == [], "that nothing is selected.")

    # Or fluently, on anything inheriting VerificationMixin
    page.movies.options[0].verify_text("12 Angry Men").verify_selected(False)

Text comparison is exact (ordinal): no trimming and no case folding.
Class verification only reports missing classes and ignores extra ones.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Tuple, TypeVar, Union

import allure
from loguru import logger

from .capabilities import Block, Element, HasText, Locator, Selectable, classes_of, describe_locator
from .exceptions import VerificationError

T = TypeVar("T")
TSelectable = TypeVar("TSelectable", bound=Selectable)
THasText = TypeVar("THasText", bound=HasText)
TBlock = TypeVar("TBlock", bound=Block)
TElement = TypeVar("TElement", bound=Element)
D = TypeVar("D")

DEFAULT_DESCRIPTION = "custom verification."


def _fail(message: str) -> None:
    logger.debug(f"❌ FAIL: {message}")
    raise VerificationError(message)


# ================================================================================
# Generic Verifications
# ================================================================================

def verify(
    value: T,
    predicate: Callable[[T], bool],
    description: str = DEFAULT_DESCRIPTION,
) -> T:
    """
    Verify that ``predicate(value)`` holds.

    The failure message is ``"Unable to verify " + description``, so
    descriptions read best when they start with "that", e.g.
    ``"that the grid is empty."``.

    Args:
        value: Object under verification
        predicate: Condition evaluated against ``value``
        description: Human-readable description of the condition

    Returns:
        ``value`` unchanged

    Raises:
        VerificationError: If the predicate is falsy
    """
    with allure.step(f"Verify {description}"):
        if not predicate(value):
            _fail("Unable to verify " + description)
    logger.debug(f"✅ PASS: {description}")
    return value


def verify_that(value: T, assertion: Callable[[T], Any]) -> T:
    """
    Run an assertion from any assertion library against ``value``.

    Any exception raised by ``assertion`` is wrapped in a
    ``VerificationError`` whose message carries the original message; the
    original exception is kept as ``__cause__``.
    """
    with allure.step("Verify assertion"):
        try:
            assertion(value)
        except Exception as e:
            logger.debug(f"❌ FAIL: assertion raised {type(e).__name__}: {e}")
            raise VerificationError(f"Unable to verify.\n{e}") from e
    return value


# ================================================================================
# Capability Verifications
# ================================================================================

def verify_selected(selectable: TSelectable, selected: bool) -> TSelectable:
    with allure.step(f"Verify selected is {selected}"):
        actual = selectable.selected
        if actual != selected:
            _fail(f"Selection verification failed. Expected: {selected}, Actual: {actual}.")
    return selectable


def verify_text(has_text: THasText, text: str) -> THasText:
    with allure.step(f"Verify text is '{text}'"):
        actual = has_text.text
        if actual != text:
            _fail(f"Text verification failed. Expected: {text}, Actual: {actual}.")
    return has_text


def verify_text_mismatch(has_text: THasText, text: str) -> THasText:
    with allure.step(f"Verify text is not '{text}'"):
        actual = has_text.text
        if actual == text:
            _fail(f"Text mismatch verification failed. Unexpected: {text}, Actual: {actual}.")
    return has_text


def verify_text_contains(has_text: THasText, text: str) -> THasText:
    with allure.step(f"Verify text contains '{text}'"):
        actual = has_text.text
        if text not in actual:
            _fail(f'Expected "{actual}" to contain "{text}"')
    return has_text


def _has_match(block: Block, locator: Locator) -> bool:
    # Only the first match is pulled from lazy sequences
    for _ in block.find_elements(locator):
        return True
    return False


def verify_presence_of(block: TBlock, element: str, locator: Locator) -> TBlock:
    description = f"{element} {describe_locator(locator)}"
    with allure.step(f"Verify presence of {description}"):
        if not _has_match(block, locator):
            _fail(f"Couldn't verify presence of {description}")
    return block


def verify_absence_of(block: TBlock, element: str, locator: Locator) -> TBlock:
    description = f"{element} {describe_locator(locator)}"
    with allure.step(f"Verify absence of {description}"):
        if _has_match(block, locator):
            _fail(f"Couldn't verify absence of {description}")
    return block


def verify_presence(block: TBlock, locator: Locator) -> TBlock:
    return verify_presence_of(block, "element", locator)


def verify_absence(block: TBlock, locator: Locator) -> TBlock:
    return verify_absence_of(block, "element", locator)


# ================================================================================
# Class Verifications
# ================================================================================

def _flatten_classes(expected: Tuple[Union[str, Iterable[str]], ...]) -> List[str]:
    """Accept both ``("a", "b")`` and ``(["a", "b"],)`` call styles."""
    if len(expected) == 1 and not isinstance(expected[0], str):
        return list(expected[0])
    return list(expected)


def _check_classes(actual: Iterable[str], expected: List[str]) -> None:
    actual = set(actual)
    missing: List[str] = []
    for name in expected:
        if name not in actual and name not in missing:
            missing.append(name)

    if missing:
        _fail("Block is missing the following expected classes: " + ", ".join(missing))


def verify_classes(element: TElement, *expected_classes: Union[str, Iterable[str]]) -> TElement:
    """
    Verify the element carries every expected CSS class.

    Accepts either several class names or a single iterable of names.
    All missing classes are reported together; extra classes are ignored.
    """
    expected = _flatten_classes(expected_classes)
    with allure.step(f"Verify classes {', '.join(expected)}"):
        _check_classes(element.classes, expected)
    return element


def verify_element_classes(web_element: Any, *expected_classes: Union[str, Iterable[str]]) -> Any:
    """Same as ``verify_classes`` for a raw Selenium ``WebElement``."""
    expected = _flatten_classes(expected_classes)
    _check_classes(classes_of(web_element), expected)
    return web_element


# ================================================================================
# Store
# ================================================================================

def store(value: T, func: Callable[[T], D]) -> Tuple[T, D]:
    """
    Capture data from ``value`` mid-chain.

    Returns:
        ``(value, func(value))`` with ``value`` being the same object
    """
    return value, func(value)


# ================================================================================
# Fluent Mixin
# ================================================================================

class VerificationMixin:
    """
    Exposes the verification chain as methods.

    Page objects and element wrappers inherit this so checks read fluently:

        option.verify_text("Taxi Driver").verify_selected(True)

    Capability-specific methods only make sense on classes that also
    implement the matching capability.
    """

    def verify(self, predicate, description: str = DEFAULT_DESCRIPTION):
        return verify(self, predicate, description)

    def verify_that(self, assertion):
        return verify_that(self, assertion)

    def verify_selected(self, selected: bool):
        return verify_selected(self, selected)

    def verify_text(self, text: str):
        return verify_text(self, text)

    def verify_text_mismatch(self, text: str):
        return verify_text_mismatch(self, text)

    def verify_text_contains(self, text: str):
        return verify_text_contains(self, text)

    def verify_presence(self, locator: Locator):
        return verify_presence(self, locator)

    def verify_absence(self, locator: Locator):
        return verify_absence(self, locator)

    def verify_presence_of(self, element: str, locator: Locator):
        return verify_presence_of(self, element, locator)

    def verify_absence_of(self, element: str, locator: Locator):
        return verify_absence_of(self, element, locator)

    def verify_classes(self, *expected_classes):
        return verify_classes(self, *expected_classes)

    def store(self, func):
        return store(self, func)


__all__ = [
    "DEFAULT_DESCRIPTION",
    "VerificationMixin",
    "verify",
    "verify_that",
    "verify_selected",
    "verify_text",
    "verify_text_mismatch",
    "verify_text_contains",
    "verify_presence",
    "verify_absence",
    "verify_presence_of",
    "verify_absence_of",
    "verify_classes",
    "verify_element_classes",
    "store",
]
