# storefront_e2e/utils/selectors.py

import re

from selenium.webdriver.common.by import By

# 'button:contains("Add to Cart")' -> tag + visible text
CONTAINS_PATTERN = re.compile(r"""^(?P<tag>[\w\-*]+):contains\((?P<quote>["'])(?P<text>.+)(?P=quote)\)$""")

XPATH_PREFIXES = ("/", "./", "(")


def xpath_literal(text: str) -> str:
    """Quotes text for use inside an XPath expression."""
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    # Both quote kinds present: concat('a', '"', 'b')
    parts = text.split('"')
    return "concat(" + ", '\"', ".join(f'"{part}"' for part in parts) + ")"


def to_locator(selector) -> tuple:
    """
    Converts a selector string into a Selenium locator tuple.

    CSS is the default. Strings starting with "/", "./" or "(" are XPath, and
    'tag:contains("text")' matches a tag by its visible text. Locator tuples
    such as (By.ID, "email") pass through unchanged.
    """
    if isinstance(selector, tuple):
        if len(selector) != 2:
            raise ValueError(f"Locator tuple must be (by, value), got {selector!r}")
        return selector

    if not isinstance(selector, str) or not selector.strip():
        raise ValueError(f"Selector must be a non-empty string, got {selector!r}")

    selector = selector.strip()
    if selector.startswith(XPATH_PREFIXES):
        return (By.XPATH, selector)

    match = CONTAINS_PATTERN.match(selector)
    if match:
        text = xpath_literal(match.group("text"))
        return (By.XPATH, f"//{match.group('tag')}[contains(normalize-space(.), {text})]")

    return (By.CSS_SELECTOR, selector)


def describe(selector) -> str:
    """Human readable form of a selector for log and error messages."""
    if isinstance(selector, tuple):
        return f"{selector[0]}={selector[1]}"
    return str(selector)
