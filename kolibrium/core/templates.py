#!/usr/bin/env python3
"""
Locator enums with mustache templates.

This module contains the ``locators`` class decorator that turns an Enum of
locator specs into a catalogue of Selenium locators. Plain specs become fixed
locators; specs containing ``{{variables}}`` become callables that take the
variable values as keyword arguments.

Example:
    @locators
    class Inventory(Enum):
        CART = by_css(".shopping_cart_link")
        ADD_TO_CART = by_data_test("add-to-cart-{{item}}")
        SORT = None

    Inventory.CART.locator
    Inventory.ADD_TO_CART(item="sauce-labs-backpack")
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from chevron.tokenizer import tokenize
from selenium.webdriver.common.by import By

from .locator_utils import ID_OR_NAME, Locator, escape_quotes
from .locators import ElementDescriptor, ElementsDescriptor

_SUBSTITUTED = ("variable", "no escape")
_IGNORED = ("comment", "set delimiter")
_RESERVED_NAMES = ("locator", "variables", "element")


class LocatorSpec:
    """
    A strategy and an optional template; an empty template means "use the member name".

    Instances compare by identity so equal specs never collapse into enum aliases.
    """

    def __init__(self, by: str, template: str = "", data_attribute: Optional[str] = None):
        self.by = by
        self.template = template
        self.data_attribute = data_attribute

    def __repr__(self):
        return f"LocatorSpec(by={self.by!r}, template={self.template!r})"


def by_class_name(template=""):
    return LocatorSpec(By.CLASS_NAME, template)


def by_css(template=""):
    return LocatorSpec(By.CSS_SELECTOR, template)


def by_id(template=""):
    return LocatorSpec(By.ID, template)


def by_id_or_name(template=""):
    return LocatorSpec(ID_OR_NAME, template)


def by_link_text(template=""):
    return LocatorSpec(By.LINK_TEXT, template)


def by_name(template=""):
    return LocatorSpec(By.NAME, template)


def by_partial_link_text(template=""):
    return LocatorSpec(By.PARTIAL_LINK_TEXT, template)


def by_tag_name(template=""):
    return LocatorSpec(By.TAG_NAME, template)


def by_xpath(template=""):
    return LocatorSpec(By.XPATH, template)


def by_data_qa(template=""):
    return LocatorSpec(By.XPATH, template, data_attribute="data-qa")


def by_data_test(template=""):
    return LocatorSpec(By.XPATH, template, data_attribute="data-test")


def by_data_test_id(template=""):
    return LocatorSpec(By.XPATH, template, data_attribute="data-testid")


def parse_template(template: str) -> List[Tuple[str, str]]:
    """
    Split a template into literal and variable tokens.

    Raises:
        ValueError: If the template uses sections, partials or other
            constructs a locator cannot express
    """
    tokens = []
    for tag_type, key in tokenize(template):
        if tag_type == "literal":
            tokens.append(("literal", key))
        elif tag_type in _SUBSTITUTED:
            tokens.append(("variable", key.strip()))
        elif tag_type in _IGNORED:
            continue
        else:
            raise ValueError(f"Unsupported mustache tag '{tag_type}' in locator template {template!r}")
    return tokens


def template_variables(template: str) -> Tuple[str, ...]:
    """Return the distinct variable names of ``template`` in order of appearance."""
    seen = dict.fromkeys(key for kind, key in parse_template(template) if kind == "variable")
    return tuple(seen)


def render_template(template: str, values: Dict[str, Any]) -> str:
    """
    Substitute ``values`` into ``template`` verbatim.

    Raises:
        KeyError: If a variable has no value
    """
    parts = []
    for kind, key in parse_template(template):
        if kind == "literal":
            parts.append(key)
        else:
            if key not in values:
                raise KeyError(f"Missing value for locator variable '{key}'")
            parts.append(str(values[key]))
    return "".join(parts)


class _ResolvedLocator:

    def __init__(self, member_name: str, spec: LocatorSpec):
        self.spec = spec
        self.template = spec.template or member_name
        self.variables = template_variables(self.template)

    def build(self, values: Dict[str, Any]) -> Locator:
        unknown = set(values) - set(self.variables)
        if unknown:
            raise KeyError(f"Unknown locator variable(s): {', '.join(sorted(unknown))}")
        value = render_template(self.template, values)
        if self.spec.data_attribute:
            return Locator(By.XPATH, f".//*[@{self.spec.data_attribute}={escape_quotes(value)}]")
        return Locator(self.spec.by, value)


def _member_locator(member) -> Locator:
    resolved = member._kolibrium_locator
    if resolved.variables:
        raise TypeError(
            f"{type(member).__name__}.{member.name} is a template; call it with "
            f"{', '.join(resolved.variables)}"
        )
    return resolved.build({})


def _member_call(member, **values) -> Locator:
    return member._kolibrium_locator.build(values)


def _member_variables(member) -> Tuple[str, ...]:
    return member._kolibrium_locator.variables


def _member_element(member, plural: bool = False, **kwargs):
    """Build a standalone locator descriptor; template values are passed as keyword arguments."""
    resolved = member._kolibrium_locator
    values = {key: kwargs.pop(key) for key in resolved.variables if key in kwargs}
    locator = resolved.build(values)
    descriptor_class = ElementsDescriptor if plural else ElementDescriptor
    return descriptor_class(locator, **kwargs)


def locators(enum_class):
    """
    Class decorator turning an Enum of LocatorSpec values into locators.

    Each member gets a ``locator`` property for fixed locators, is callable
    with keyword arguments for templates, and offers ``element(...)`` to
    build a locator descriptor. Members whose value is not a LocatorSpec
    locate by id or name using the member name.

    Raises:
        TypeError: If the decorated class is not an Enum
        ValueError: If the enum has no members, a member declares more than
            one locator strategy, two members share a value or a member is
            named locator, variables or element
    """
    if not isinstance(enum_class, type) or not issubclass(enum_class, Enum):
        raise TypeError(f"@locators can only be applied to Enum classes, got {enum_class!r}")
    if not enum_class.__members__:
        raise ValueError(f"{enum_class.__name__} must declare at least one locator")

    for name, member in enum_class.__members__.items():
        if name in _RESERVED_NAMES:
            raise ValueError(
                f"{enum_class.__name__}.{name} clashes with the '{name}' member attribute; rename it"
            )
        if member.name != name:
            raise ValueError(
                f"{enum_class.__name__}.{name} has the same value as {member.name}; "
                f"give each member its own spec, e.g. {name} = by_id_or_name()"
            )

    for member in enum_class:
        value = member.value
        if isinstance(value, (list, tuple)):
            specs = [item for item in value if isinstance(item, LocatorSpec)]
            if len(specs) > 1:
                raise ValueError(
                    f"{enum_class.__name__}.{member.name} declares more than one locator strategy"
                )
            value = specs[0] if specs else None
        spec = value if isinstance(value, LocatorSpec) else LocatorSpec(ID_OR_NAME)
        member._kolibrium_locator = _ResolvedLocator(member.name, spec)

    enum_class.locator = property(_member_locator)
    enum_class.variables = property(_member_variables)
    enum_class.__call__ = _member_call
    enum_class.element = _member_element
    return enum_class
