"""Tests for @font-face source resolution and descriptor extraction."""

import pytest

from font_manifest.bundle.base import BundleAsset
from font_manifest.css.tree import Declaration, StyleNode, parse_stylesheet
from font_manifest.fontface.extractor import (
    FontFaceDescriptor,
    extract_font_face_info,
    get_all_declarations,
    get_extension,
    get_mime_type,
    is_font_file,
    is_stylesheet,
)
from font_manifest.fontface.sources import FontFaceSource, parse_src_declaration


class FakeRule:
    """Minimal StyleNode holding a fixed declaration list."""

    def __init__(self, declarations: list[tuple[str, str]]):
        self.declarations = declarations

    def walk_at_rules(self, name, visitor) -> None:
        pass

    def walk_declarations(self, visitor) -> None:
        for prop, value in self.declarations:
            visitor(Declaration(prop, value))


def first_font_face(css: str) -> StyleNode:
    result = parse_stylesheet(css)
    assert result.tree is not None
    rules: list[StyleNode] = []
    result.tree.walk_at_rules("font-face", rules.append)
    return rules[0]


class TestParseSrcDeclaration:
    """Test resolution of src alternatives."""

    def test_url_and_format(self) -> None:
        """Test that each alternative yields its url and format."""
        sources = parse_src_declaration('url(a.woff2) format("woff2"), url(a.ttf)')

        assert sources == [
            FontFaceSource(url="a.woff2", format="woff2"),
            FontFaceSource(url="a.ttf", format=None),
        ]

    def test_quoted_url(self) -> None:
        """Test that quoted urls are resolved."""
        assert parse_src_declaration("url('a.woff')") == [FontFaceSource(url="a.woff")]

    def test_format_before_url(self) -> None:
        """Test that url and format are found independently of order."""
        assert parse_src_declaration("format(woff) url(a.woff)") == [
            FontFaceSource(url="a.woff", format="woff")
        ]

    def test_alternative_without_url(self) -> None:
        """Test that local() alternatives are kept with no url."""
        sources = parse_src_declaration('local("Inter"), url(inter.woff2)')

        assert sources == [
            FontFaceSource(url=None, format=None),
            FontFaceSource(url="inter.woff2", format=None),
        ]

    def test_missing_declaration(self) -> None:
        """Test that a missing src yields no sources."""
        assert parse_src_declaration(None) == []

    def test_empty_declaration(self) -> None:
        """Test that an empty src still yields one empty source."""
        assert parse_src_declaration("") == [FontFaceSource(url=None)]


class TestExtractFontFaceInfo:
    """Test descriptor extraction from @font-face rules."""

    def test_one_descriptor_per_source(self) -> None:
        """Test that N alternatives yield N descriptors sharing rule values."""
        rule = first_font_face(
            """
            @font-face {
                font-family: "Inter";
                font-weight: 100 900;
                font-style: italic;
                font-display: swap;
                src: url(inter.woff2) format("woff2"), url(inter.woff), url(inter.ttf);
            }
            """
        )

        descriptors = extract_font_face_info(rule)

        assert [d.url for d in descriptors] == ["inter.woff2", "inter.woff", "inter.ttf"]
        for descriptor in descriptors:
            assert descriptor.family == "Inter"
            assert descriptor.weight == "100 900"
            assert descriptor.style == "italic"
            assert descriptor.display == "swap"

    def test_defaults(self) -> None:
        """Test default weight, style and display."""
        rule = first_font_face("@font-face { font-family: Inter; src: url(inter.woff2) }")

        (descriptor,) = extract_font_face_info(rule)

        assert descriptor.weight == "normal"
        assert descriptor.style == "normal"
        assert descriptor.display == "auto"

    def test_explicit_format_wins(self) -> None:
        """Test that format() takes precedence over the file extension."""
        rule = FakeRule([("src", 'url(a.ttf) format("woff")')])

        (descriptor,) = extract_font_face_info(rule)

        assert descriptor.format == "woff"
        assert descriptor.mime == "font/truetype"

    def test_format_from_extension(self) -> None:
        """Test that the format falls back to the lower-cased extension."""
        rule = FakeRule([("src", "url(fonts/Inter.WOFF2)")])

        (descriptor,) = extract_font_face_info(rule)

        assert descriptor.format == "woff2"
        assert descriptor.mime == "font/woff2"

    def test_quotes_stripped_from_family(self) -> None:
        """Test that quote characters are removed from the family."""
        rule = FakeRule([("font-family", "'Open Sans'"), ("src", "url(a.woff)")])

        assert extract_font_face_info(rule)[0].family == "Open Sans"

    def test_missing_family(self) -> None:
        """Test that a rule without font-family has no family."""
        rule = FakeRule([("src", "url(a.woff)")])

        assert extract_font_face_info(rule)[0].family is None

    def test_last_declaration_wins(self) -> None:
        """Test that repeated properties keep the last value."""
        rule = FakeRule(
            [
                ("font-weight", "400"),
                ("src", "url(a.woff)"),
                ("font-weight", "700"),
            ]
        )

        assert extract_font_face_info(rule)[0].weight == "700"

    def test_no_src(self) -> None:
        """Test that a rule without src yields nothing."""
        rule = FakeRule([("font-family", "Inter")])

        assert extract_font_face_info(rule) == []

    def test_source_without_url(self) -> None:
        """Test that url-less alternatives are still emitted."""
        rule = FakeRule([("src", 'local("Inter"), url(inter.woff2)')])

        descriptors = extract_font_face_info(rule)

        assert len(descriptors) == 2
        assert descriptors[0].url is None
        assert descriptors[0].format is None
        assert descriptors[0].mime == "unknown"

    def test_context_data_applied_last(self) -> None:
        """Test that context data is merged into every descriptor."""
        rule = FakeRule([("src", "url(a.woff2), url(a.woff)")])

        descriptors = extract_font_face_info(rule, {"defined_in": ["fonts.css"]})

        assert [d.defined_in for d in descriptors] == [["fonts.css"], ["fonts.css"]]

    def test_manifest_spelling_of_context_key(self) -> None:
        """Test that definedIn is accepted as context key."""
        rule = FakeRule([("src", "url(a.woff2)")])

        (descriptor,) = extract_font_face_info(rule, {"definedIn": ["fonts.css"]})

        assert descriptor.defined_in == ["fonts.css"]
        assert descriptor.to_font_face()["definedIn"] == ["fonts.css"]

    def test_get_all_declarations(self) -> None:
        """Test collecting declarations into a mapping."""
        rule = FakeRule([("src", "url(a.woff)"), ("src", "url(b.woff)")])

        assert get_all_declarations(rule) == {"src": "url(b.woff)"}


class TestFontFaceDescriptor:
    """Test the manifest form of a descriptor."""

    def test_to_font_face(self) -> None:
        """Test that the url is dropped and keys use manifest spelling."""
        descriptor = FontFaceDescriptor(
            url="inter.woff2",
            format="woff2",
            family="Inter",
            mime="font/woff2",
            defined_in=["fonts.css"],
        )

        assert descriptor.to_font_face() == {
            "format": "woff2",
            "family": "Inter",
            "weight": "normal",
            "style": "normal",
            "display": "auto",
            "mime": "font/woff2",
            "definedIn": ["fonts.css"],
        }


class TestExtensions:
    """Test extension, MIME and asset-kind helpers."""

    @pytest.mark.parametrize(
        "filename, mime",
        [
            ("a.woff2", "font/woff2"),
            ("a.woff", "font/woff"),
            ("a.ttf", "font/truetype"),
            ("A.TTF", "font/truetype"),
            ("a.otf", "font/opentype"),
            ("a.eot", "font/embedded-opentype"),
            ("a.eot?#iefix", "font/embedded-opentype"),
            ("a.svg", "unknown"),
            ("noext", "unknown"),
            (None, "unknown"),
        ],
    )
    def test_get_mime_type(self, filename, mime) -> None:
        """Test MIME derivation from the file extension."""
        assert get_mime_type(filename) == mime

    def test_get_mime_type_is_case_insensitive(self) -> None:
        """Test that upper and lower case extensions agree."""
        assert get_mime_type("x.TTF") == get_mime_type("x.ttf")

    def test_get_extension(self) -> None:
        """Test extension extraction."""
        assert get_extension("./assets/Inter-x1.WOFF2") == "woff2"
        assert get_extension("fonts/inter") == ""
        assert get_extension(None) is None

    def test_is_stylesheet(self) -> None:
        """Test stylesheet detection."""
        assert is_stylesheet(BundleAsset("assets/main.CSS"))
        assert not is_stylesheet(BundleAsset("assets/main.css", type="chunk"))
        assert not is_stylesheet(BundleAsset("assets/main.js"))
        assert not is_stylesheet(BundleAsset(""))

    def test_is_font_file(self) -> None:
        """Test font file detection."""
        assert is_font_file(BundleAsset("assets/a.woff2"))
        assert is_font_file(BundleAsset("assets/a.Woff"))
        assert is_font_file(BundleAsset("assets/a.eot"))
        assert not is_font_file(BundleAsset("assets/a.svg"))
        assert not is_font_file(BundleAsset("assets/a.ttf", type="chunk"))
