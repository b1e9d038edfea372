import json
import logging

import pytest

from cssbuilder import *
from jsonobj import *


@pytest.fixture
def builder():
    return css_selector_builder


@pytest.mark.parametrize(
    "build,expected",
    [
        (lambda b: b.element("div"), "div"),
        (lambda b: b.id("main"), "#main"),
        (lambda b: b.class_("container"), ".container"),
        (lambda b: b.attr("title"), "[title]"),
        (lambda b: b.pseudo_class("hover"), ":hover"),
        (lambda b: b.pseudo_element("before"), "::before"),
        (lambda b: b.element("a").id("b"), "a#b"),
        (lambda b: b.id("b").element("a"), "a#b"),
        (lambda b: b.class_("x").class_("y"), ".x.y"),
        (lambda b: b.class_("y").class_("x"), ".y.x"),
        (lambda b: b.element("a").attr('href$=".png"'), 'a[href$=".png"]'),
        (lambda b: b.attribute("a=1").attribute("b=2"), "[a=1b=2]"),
        (
            lambda b: b.id("main").class_("container").class_("editable"),
            "#main.container.editable",
        ),
        (
            lambda b: b.element("a").attr('href$=".png"').pseudo_class("focus"),
            'a[href$=".png"]:focus',
        ),
        (
            lambda b: b.pseudo_element("after")
            .pseudo_class("first-child")
            .attr("lang|=en")
            .class_("note")
            .id("x")
            .element("p"),
            "p#x.note[lang|=en]:first-child::after",
        ),
        (
            lambda b: b.element("tr")
            .pseudo_class("nth-of-type(even)")
            .pseudo_class("hover"),
            "tr:nth-of-type(even):hover",
        ),
        (
            lambda b: b.element("input").attr("type=text").pseudo_class("not(:focus)"),
            "input[type=text]:not(:focus)",
        ),
    ],
)
def test_simple_selector(builder, build, expected):
    selector = build(builder)
    assert isinstance(selector, SimpleSelector)
    assert selector.stringify() == expected
    assert str(selector) == expected
    assert builder.render(selector) == expected
    assert repr(selector) == "<SimpleSelector %s>" % repr(expected)


def test_empty_simple_selector():
    assert str(SimpleSelector()) == ""


def test_chaining_returns_same_selector(builder):
    selector = builder.element("div")
    assert selector.id("main") is selector
    assert selector.class_("a") is selector
    assert selector.attr("b") is selector
    assert selector.attribute("c") is selector
    assert selector.pseudo_class("d") is selector
    assert selector.pseudo_element("e") is selector
    assert selector.tag == "div"
    assert selector.id_name == "main"
    assert selector.classes == ["a"]
    assert selector.attrs == ["b", "c"]
    assert selector.pseudo_classes == ["d"]
    assert selector.pseudo_element_name == "e"


@pytest.mark.parametrize(
    "build,part",
    [
        (lambda b: b.element("div").element("span"), "element"),
        (lambda b: b.element("div").id("main").class_("x").element("div"), "element"),
        (lambda b: b.id("main").id("other"), "id"),
        (
            lambda b: b.pseudo_element("before").pseudo_element("after"),
            "pseudo-element",
        ),
    ],
)
def test_duplicate_part(builder, build, part):
    with pytest.raises(DuplicateSelectorPart) as excinfo:
        build(builder)
    assert excinfo.value.part == part


def test_duplicate_part_leaves_selector_untouched(builder):
    selector = builder.element("div").id("main")
    with pytest.raises(DuplicateSelectorPart) as excinfo:
        selector.id("other")
    assert excinfo.value.existing == "main"
    assert excinfo.value.value == "other"
    assert (
        str(excinfo.value) == "selector already has an id ('main'), cannot add 'other'"
    )
    assert str(selector) == "div#main"


@pytest.mark.parametrize(
    "build,expected",
    [
        (lambda b: b.element("").element("div"), "div"),
        (lambda b: b.id("").id("main"), "#main"),
        (lambda b: b.pseudo_element("").pseudo_element("after"), "::after"),
    ],
)
def test_empty_part_is_unset(builder, build, expected):
    assert str(build(builder)) == expected


def test_duplicate_part_after_render(builder):
    selector = builder.element("a")
    assert str(selector) == "a"
    with pytest.raises(DuplicateSelectorPart):
        selector.element("b")
    assert str(selector) == "a"


def test_duplicate_part_is_logged(builder, caplog):
    with caplog.at_level(logging.DEBUG, logger="cssbuilder"):
        with pytest.raises(DuplicateSelectorPart):
            builder.pseudo_element("before").pseudo_element("after")
    assert "pseudo-element" in caplog.text


def test_independent_chains(builder):
    first = builder.element("div").class_("a").attr("x=1")
    second = builder.element("span")
    assert first is not second
    assert str(first) == "div.a[x=1]"
    assert str(second) == "span"
    # Rendering is pure and does not leak into subsequent chains.
    assert str(first) == "div.a[x=1]"
    assert str(builder.class_("b")) == ".b"
    assert str(builder.element("div")) == "div"


@pytest.mark.parametrize(
    "build,expected",
    [
        (
            lambda b: b.combine(b.element("div"), "+", b.element("span")),
            "div + span",
        ),
        (
            lambda b: b.combine(
                b.combine(b.element("div"), "+", b.element("span")), ">", b.element("p")
            ),
            "div + span > p",
        ),
        (
            lambda b: b.combine(b.element("ul"), " ", b.element("li")),
            "ul   li",
        ),
        (
            lambda b: b.combine(
                b.element("h1"), Combinator.SUBSEQUENT_SIBLING, b.element("p")
            ),
            "h1 ~ p",
        ),
        (
            lambda b: b.combine(
                b.element("ul"), Combinator.DESCENDANT, b.element("li")
            ),
            "ul   li",
        ),
        (
            lambda b: b.combine(b.element("a"), "||", b.element("b")),
            "a || b",
        ),
        (
            lambda b: b.combine(
                b.element("div").id("main").class_("container").class_("draggable"),
                "+",
                b.combine(
                    b.element("table").id("data"),
                    "~",
                    b.combine(
                        b.element("tr").pseudo_class("nth-of-type(even)"),
                        " ",
                        b.element("td").pseudo_class("nth-of-type(even)"),
                    ),
                ),
            ),
            "div#main.container.draggable + table#data"
            " ~ tr:nth-of-type(even)   td:nth-of-type(even)",
        ),
        (
            lambda b: b.combine(
                b.element("p").pseudo_element("first-line"),
                Combinator.CHILD,
                b.attr("data-x"),
            ),
            "p::first-line > [data-x]",
        ),
    ],
)
def test_combined_selector(builder, build, expected):
    selector = build(builder)
    assert isinstance(selector, CombinedSelector)
    assert selector.stringify() == expected
    assert builder.render(selector) == expected
    assert repr(selector) == "<CombinedSelector %s>" % repr(expected)


def test_combine_keeps_references(builder):
    left = builder.element("div")
    right = builder.element("p")
    selector = builder.combine(left, Combinator.CHILD, right)
    assert selector.left is left
    assert selector.right is right
    assert selector.combinator == ">"
    right.class_("late")
    assert str(selector) == "div > p.late"


def test_render_is_repeatable(builder):
    selector = builder.combine(builder.id("a"), "~", builder.class_("b").class_("c"))
    assert builder.render(selector) == builder.render(selector) == "#a ~ .b.c"


def test_rectangle():
    r = Rectangle(10, 20)
    assert r.width == 10
    assert r.height == 20
    assert r.area == 200
    with pytest.raises(AttributeError):
        r.area = 1


@pytest.mark.parametrize(
    "obj,expected",
    [
        ([1, 2, 3], "[1,2,3]"),
        ({"width": 10, "height": 20}, '{"width":10,"height":20}'),
        (Rectangle(10, 20), '{"width":10,"height":20}'),
        ({"shapes": [Rectangle(1, 2)]}, '{"shapes":[{"width":1,"height":2}]}'),
        ("text", '"text"'),
        (None, "null"),
    ],
)
def test_get_json(obj, expected):
    assert get_json(obj) == expected


def test_get_json_unserializable():
    with pytest.raises(TypeError) as excinfo:
        get_json(object())
    assert "object" in str(excinfo.value)
    assert excinfo.value.__suppress_context__


class Circle:
    def __init__(self, radius):
        self.radius = radius

    def get_circumference(self):
        return 2 * 3.14 * self.radius


def test_from_json():
    r = from_json(Rectangle, '{"width":10,"height":20}')
    assert isinstance(r, Rectangle)
    assert r.width == 10
    assert r.height == 20
    assert r.area == 200

    c = from_json(Circle, '{"radius":10}')
    assert isinstance(c, Circle)
    assert c.get_circumference() == pytest.approx(62.8)


def test_from_json_round_trip():
    r = from_json(Rectangle, get_json(Rectangle(3, 4)))
    assert (r.width, r.height, r.area) == (3, 4, 12)


@pytest.mark.parametrize("s", ["[1,2,3]", "42", '"text"', "null"])
def test_from_json_not_an_object(s):
    with pytest.raises(JSONObjectError) as excinfo:
        from_json(Rectangle, s)
    assert excinfo.value.value == json.loads(s)


def test_from_json_malformed():
    with pytest.raises(json.JSONDecodeError):
        from_json(Rectangle, '{"width": 10')
