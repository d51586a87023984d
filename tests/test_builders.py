from pagegen.builders import (
    anchor,
    attribute,
    closed_tag,
    field_set,
    form,
    generated,
    image,
    image_link,
    line_break,
    page,
    paragraph,
    radio_field,
    stylesheet,
    style_ref,
    submit_field,
    tag,
    text,
    text_field,
    text_header1,
    text_link,
    unencoded_attribute,
    viewport,
    with_attributes_,
    with_class,
    with_class_,
)
from pagegen.model import Class, FormMethod, Id, KeyUnencodedValue, KeyValue, StyleRef, WithClass
from pagegen.render import render
from pagegen.small_tree import One, Two


def _body_lines(*elements) -> list[str]:
    lines = render(page("", body=elements)).splitlines()
    return lines[lines.index("  <body>") + 1 : lines.index("  </body>")]


def test_form_with_fields():
    lines = _body_lines(
        form(
            "/search",
            FormMethod.GET,
            [field_set([text_field("q", ""), radio_field("scope", "all"), submit_field("go", "Search")])],
        )
    )

    assert lines == [
        '    <form action="/search" method="GET">',
        "      <fieldset>",
        '        <input type="text" name="q"/>',
        '        <input type="radio" name="scope" value="all"/>',
        '        <input type="submit" name="go" value="Search"/>',
        "      </fieldset>",
        "    </form>",
    ]


def test_links_and_images():
    lines = _body_lines(text_link("/about", "About"), image_link("/", "logo.png", "Home & co"))

    assert lines == [
        '    <a href="/about">',
        "      About",
        "    </a>",
        '    <a href="/">',
        '      <img src="logo.png" alt="Home &amp; co"/>',
        "    </a>",
    ]


def test_headers_paragraphs_and_breaks():
    lines = _body_lines(text_header1("Title"), paragraph([text("a"), line_break, text("b")]))

    assert lines == [
        "    <h1>",
        "      Title",
        "    </h1>",
        "    <p>",
        "      a",
        "      <br/>",
        "      b",
        "    </p>",
    ]


def test_with_class_accepts_strings_and_refs():
    wrapper = with_class(["a", style_ref("b")], [closed_tag("hr")])
    assert isinstance(wrapper, WithClass)
    assert list(wrapper.classes) == [StyleRef("a"), StyleRef("b")]
    assert _body_lines(wrapper) == ['    <hr class="a b"/>']


def test_single_element_wrappers():
    lines = _body_lines(
        with_class_(["outer"], tag("span", [Class(One(style_ref("own")))], [])),
        with_attributes_([Id("x")], closed_tag("br")),
    )
    assert lines == ['    <span class="own outer"/>', '    <br id="x"/>']


def test_attribute_helpers():
    assert attribute("data-a", "1") == KeyValue("data-a", "1")
    assert unencoded_attribute("data-b", "2") == KeyUnencodedValue("data-b", "2")
    assert tag("div", Two(attribute("a", "1"), attribute("b", "2")), []).attributes == Two(
        KeyValue("a", "1"), KeyValue("b", "2")
    )


def test_page_helpers():
    built = page(
        "Home",
        links=[stylesheet("site.css")],
        metas=[viewport("width=device-width")],
        body=[anchor("#top", [image("up.png", "Up")])],
    )

    text_out = render(built)

    assert '    <link rel="stylesheet" href="site.css"/>' in text_out
    assert '    <meta name="viewport" content="width=device-width"/>' in text_out
    assert '      <img src="up.png" alt="Up"/>' in text_out


def test_generated_helper():
    node = generated(lambda ctx, indent, classes, attributes, append: append(indent, "<hr/>"))
    assert _body_lines(node) == ["    <hr/>"]
