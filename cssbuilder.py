"""
:mod:`cssbuilder` builds CSS selector strings from chained method calls.

:mod:`cssbuilder`

- is a single module;
- has no dependency outside `PSL <https://docs.python.org/3/library/>`_;
- only builds and stringifies selectors, it does not parse, validate or
  match them.

Each call on :data:`css_selector_builder` starts a brand new selector,
so unrelated chains never see each other's parts.

Simple example:

.. doctest::

   >>> from cssbuilder import css_selector_builder as builder
   >>> builder.id('main').class_('container').class_('editable').stringify()
   '#main.container.editable'
   >>> builder.element('a').attr('href$=".png"').pseudo_class('focus').stringify()
   'a[href$=".png"]:focus'
   >>> str(builder.combine(
   ...     builder.element('div').id('main').class_('container').class_('draggable'),
   ...     '+',
   ...     builder.combine(
   ...         builder.element('table').id('data'),
   ...         '~',
   ...         builder.combine(
   ...             builder.element('tr').pseudo_class('nth-of-type(even)'),
   ...             ' ',
   ...             builder.element('td').pseudo_class('nth-of-type(even)'),
   ...         ),
   ...     ),
   ... ))
   'div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)'
"""

import logging
from enum import Enum
from typing import List, Optional, Union

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

CombinatorLike = Union[str, "Combinator"]


class DuplicateSelectorPart(Exception):
    """
    Exception raised when a part that may occur only once in a sequence
    of simple selectors (element, id or pseudo-element) is set twice.

    The selector is left untouched; start a new chain to recover.

    Attributes:
        part (:class:`str`):
            Name of the part, one of ``element``, ``id`` and
            ``pseudo-element``.
        existing (:class:`str`):
            Value already held by the selector.
        value (:class:`str`):
            Rejected value.
    """

    def __init__(self, part: str, existing: str, value: str) -> None:
        self.part = part
        self.existing = existing
        self.value = value

    def __str__(self) -> str:
        article = "an" if self.part[0] in "aeiou" else "a"
        return "selector already has %s %s (%s), cannot add %s" % (
            article,
            self.part,
            repr(self.existing),
            repr(self.value),
        )


class Selector:
    """
    Base class of the two kinds of selectors: :class:`SimpleSelector`
    and :class:`CombinedSelector`.

    Rendering is pure; a selector may be stringified any number of
    times.
    """

    def __repr__(self) -> str:
        return "<%s %s>" % (type(self).__name__, repr(str(self)))

    # Meant to be implemented by subclasses.
    def __str__(self) -> str:  # pragma: no cover
        raise NotImplementedError

    def stringify(self) -> str:
        """Alias of :func:`str`."""
        return str(self)


class SimpleSelector(Selector):
    """
    Represents a sequence of simple selectors, i.e., a selector without
    any combinator::

        element#id.class[attr]:pseudo-class::pseudo-element
                  \\----/\\----/\\-----------/
              any number of occurrences

    Chain methods mutate the selector and return it. Whatever the call
    order, the selector is rendered in the canonical order shown above.

    Note that all attribute expressions are rendered inside a single
    pair of brackets, without separator: ``[a=1b=2]``, not
    ``[a=1][b=2]``. Callers depending on per-attribute brackets have to
    include them in the expressions themselves.

    Attributes:
        tag                 (:class:`Optional`\\[:class:`str`])
        id_name             (:class:`Optional`\\[:class:`str`])
        classes             (:class:`List`\\[:class:`str`])
        attrs               (:class:`List`\\[:class:`str`])
        pseudo_classes      (:class:`List`\\[:class:`str`])
        pseudo_element_name (:class:`Optional`\\[:class:`str`])
    """

    def __init__(self) -> None:
        self.tag = None  # type: Optional[str]
        self.id_name = None  # type: Optional[str]
        self.classes = []  # type: List[str]
        self.attrs = []  # type: List[str]
        self.pseudo_classes = []  # type: List[str]
        self.pseudo_element_name = None  # type: Optional[str]

    def __str__(self) -> str:
        s = ""
        if self.tag:
            s += self.tag
        if self.id_name:
            s += "#%s" % self.id_name
        if self.classes:
            s += "".join(".%s" % class_ for class_ in self.classes)
        if self.attrs:
            s += "[%s]" % "".join(self.attrs)
        if self.pseudo_classes:
            s += "".join(":%s" % pseudo for pseudo in self.pseudo_classes)
        if self.pseudo_element_name:
            s += "::%s" % self.pseudo_element_name
        return s

    def element(self, name: str) -> "SimpleSelector":
        """Sets the type selector. Raises :class:`DuplicateSelectorPart` if set."""
        if self.tag:
            self._reject("element", self.tag, name)
        self.tag = name
        return self

    def id(self, name: str) -> "SimpleSelector":
        """Sets the ID selector. Raises :class:`DuplicateSelectorPart` if set."""
        if self.id_name:
            self._reject("id", self.id_name, name)
        self.id_name = name
        return self

    def class_(self, name: str) -> "SimpleSelector":
        self.classes.append(name)
        return self

    def attribute(self, expr: str) -> "SimpleSelector":
        """
        Appends a raw attribute expression, e.g. ``href$=".png"``,
        without the enclosing brackets.
        """
        self.attrs.append(expr)
        return self

    def attr(self, expr: str) -> "SimpleSelector":
        """Alias of :meth:`attribute`."""
        return self.attribute(expr)

    def pseudo_class(self, name: str) -> "SimpleSelector":
        """Appends a pseudo-class, e.g. ``nth-of-type(even)``, without the colon."""
        self.pseudo_classes.append(name)
        return self

    def pseudo_element(self, name: str) -> "SimpleSelector":
        """
        Sets the pseudo-element, without the double colon. Raises
        :class:`DuplicateSelectorPart` if set.
        """
        if self.pseudo_element_name:
            self._reject("pseudo-element", self.pseudo_element_name, name)
        self.pseudo_element_name = name
        return self

    @staticmethod
    def _reject(part: str, existing: str, value: str) -> None:
        logger.debug("rejecting duplicate %s %r (already %r)", part, value, existing)
        raise DuplicateSelectorPart(part, existing, value)


class CombinedSelector(Selector):
    """
    Represents two selectors joined by a combinator.

    Either side may itself be a :class:`CombinedSelector`, so arbitrarily
    long chains are built by nesting. The combinator is rendered with a
    single space on each side, whatever the token is.

    Attributes:
        left       (:class:`Selector`)
        combinator (:class:`str`)
        right      (:class:`Selector`)
    """

    def __init__(
        self, left: Selector, combinator: CombinatorLike, right: Selector
    ) -> None:
        self.left = left
        self.combinator = (
            combinator.value if isinstance(combinator, Combinator) else combinator
        )  # type: str
        self.right = right

    def __str__(self) -> str:
        return "%s %s %s" % (self.left, self.combinator, self.right)


class CssSelectorBuilder:
    """
    Facade starting new selector chains.

    Every method except :meth:`combine` and :meth:`render` returns a new
    :class:`SimpleSelector` with one part set, ready for chaining. No
    state is kept on the facade itself, so a single instance (see
    :data:`css_selector_builder`) may be shared freely.
    """

    def element(self, name: str) -> SimpleSelector:
        return SimpleSelector().element(name)

    def id(self, name: str) -> SimpleSelector:
        return SimpleSelector().id(name)

    def class_(self, name: str) -> SimpleSelector:
        return SimpleSelector().class_(name)

    def attribute(self, expr: str) -> SimpleSelector:
        return SimpleSelector().attribute(expr)

    def attr(self, expr: str) -> SimpleSelector:
        """Alias of :meth:`attribute`."""
        return self.attribute(expr)

    def pseudo_class(self, name: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(name)

    def pseudo_element(self, name: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(name)

    def combine(
        self, left: Selector, combinator: CombinatorLike, right: Selector
    ) -> CombinedSelector:
        """
        Joins two selectors with a combinator.

        Args:
            left:       selector on the left of the combinator
            combinator: any token; :class:`Combinator` members are
                        accepted too
            right:      selector on the right of the combinator

        Returns:
            A new selector holding references to (not copies of) `left`
            and `right`.
        """
        combined = CombinedSelector(left, combinator, right)
        logger.debug("combined %r", combined)
        return combined

    def render(self, selector: Selector) -> str:
        """Returns the string representation of `selector`."""
        return str(selector)


# Enum: named tokens for the combinators defined by CSS. Any other
# string is still accepted by combine().
class Combinator(Enum):
    """
    Combinator tokens.

    Members correspond to the following combinators:

    - :attr:`DESCENDANT`: ``A   B``;
    - :attr:`CHILD`: ``A > B``;
    - :attr:`NEXT_SIBLING`: ``A + B``;
    - :attr:`SUBSEQUENT_SIBLING`: ``A ~ B``.
    """

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


css_selector_builder = CssSelectorBuilder()
