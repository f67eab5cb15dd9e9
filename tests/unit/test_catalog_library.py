"""
Unit tests for the component library query operations.
"""

from pathlib import Path

import pytest

from frontend_components.catalog import (
    ComponentLibrary,
    ComponentNotFoundError,
    InvalidPathError,
    QueryResult,
    ResultStatus,
    UnknownFrameworkError,
    build_catalog,
)
from frontend_components.catalog import library as library_module


# =============================================================================
# list_frameworks
# =============================================================================


class TestListFrameworks:
    """Tests for ComponentLibrary.list_frameworks."""

    def test_lists_indexed_frameworks(self, library):
        result = library.list_frameworks()

        assert result.status is ResultStatus.OK
        assert "## HyperUI (HTML) (`hyperui`)" in result.text
        assert "- Components: 4 variants" in result.text
        assert "- Categories: application, marketing" in result.text
        assert "## FlyonUI (CSS Framework) (`flyonui`)" in result.text
        assert "- Dependencies: npm install flyonui" in result.text

    def test_omits_missing_frameworks(self, library):
        assert "daisyui" not in library.list_frameworks().text

    def test_empty_catalog(self, tmp_path):
        library = ComponentLibrary.from_directory(tmp_path / "empty")

        result = library.list_frameworks()

        assert result.status is ResultStatus.OK
        assert result.text == ""


# =============================================================================
# list_components
# =============================================================================


class TestListComponents:
    """Tests for ComponentLibrary.list_components."""

    def test_category_filter(self, library):
        result = library.list_components("hyperui", category="application")

        assert result.status is ResultStatus.OK
        assert result.text.startswith("# HyperUI (HTML) Components\n")
        assert "## application" in result.text
        assert "- **badges** (2): 1, 2" in result.text
        assert "- **buttons** (1): 1-dark" in result.text
        assert "## marketing" not in result.text

    def test_all_categories(self, library):
        result = library.list_components("flyonui")

        assert "## css" in result.text
        assert "- **all** (2): button, card" in result.text
        assert "## plugins" in result.text
        assert "- **accordion** (2): index, variants" in result.text

    def test_unknown_category_lists_nothing(self, library):
        result = library.list_components("hyperui", category="ecommerce")

        assert result.status is ResultStatus.OK
        assert result.text == "# HyperUI (HTML) Components\n"

    def test_framework_not_indexed(self, library):
        result = library.list_components("daisyui")

        assert result.status is ResultStatus.UNKNOWN_FRAMEWORK
        assert result.is_error
        assert result.text == "Unknown framework: daisyui"

    def test_framework_not_a_builtin(self, library):
        result = library.list_components("bootstrap")

        assert result.status is ResultStatus.UNKNOWN_FRAMEWORK

    def test_known_but_empty_framework_is_not_unknown(self, tmp_path):
        (tmp_path / "headlessui-vue").mkdir()
        library = ComponentLibrary.from_directory(tmp_path)

        result = library.list_components("headlessui-vue")

        assert result.status is ResultStatus.OK
        assert "## components" in result.text


# =============================================================================
# get_component
# =============================================================================


class TestGetComponent:
    """Tests for ComponentLibrary.get_component."""

    def test_returns_source(self, library):
        result = library.get_component("hyperui", "application", "badges", "1")

        assert result.status is ResultStatus.OK
        assert result.syntax == "html"
        assert result.path == "hyperui/application/badges/1.html"
        assert result.text.startswith("# 1\n\n")
        assert "**Framework:** HyperUI (HTML)" in result.text
        assert "**Dependencies:** None — pure Tailwind CSS classes" in result.text
        assert '```html\n<span class="badge">One</span>\n```' in result.text

    def test_component_dir_layout(self, library):
        result = library.get_component("headlessui-vue", "components", "dialog", "simple")

        assert result.status is ResultStatus.OK
        assert result.syntax == "vue"
        assert "<template><div /></template>" in result.text

    def test_split_plugin_variants_is_css(self, library):
        result = library.get_component("flyonui", "plugins", "accordion", "variants")

        assert result.syntax == "css"
        assert result.path == "flyonui/plugins/accordion/variants.css"
        assert ".accordion { }" in result.text

    def test_split_plugin_other_variant_is_script(self, library):
        result = library.get_component("flyonui", "plugins", "accordion", "index")

        assert result.syntax == "ts"
        assert result.path == "flyonui/plugins/accordion/index.ts"

    def test_split_css_section(self, library):
        result = library.get_component("flyonui", "css", "all", "card")

        assert result.syntax == "css"
        assert ".card { }" in result.text

    def test_missing_without_suggestions_is_not_found(self, library):
        result = library.get_component("hyperui", "application", "badges", "99")

        assert result.status is ResultStatus.NOT_FOUND
        assert result.text == "Component not found."
        assert result.matches == []

    def test_missing_with_suggestions(self, library):
        result = library.get_component("hyperui", "marketing", "badges", "1")

        assert result.status is ResultStatus.SUGGESTIONS
        assert result.matches == ["hyperui/application/badges/1.html"]
        assert result.text == (
            "Component not found at exact path. Did you mean:\n"
            "- hyperui/application/badges/1.html"
        )

    def test_unindexed_plugin_file_is_suggested(self, library):
        result = library.get_component("flyonui", "plugins", "select", "helpers")

        assert result.status is ResultStatus.SUGGESTIONS
        assert result.matches == ["flyonui/plugins/select/helpers.css"]

    def test_suggestions_stay_within_framework(self, library):
        result = library.get_component("headlessui-vue", "components", "dialog", "fancy")

        assert result.status is ResultStatus.NOT_FOUND

    def test_framework_directory_missing(self, library):
        result = library.get_component("daisyui", "components", "all", "button")

        assert result.status is ResultStatus.NOT_FOUND

    def test_unknown_framework(self, library):
        result = library.get_component("bootstrap", "components", "all", "button")

        assert result.status is ResultStatus.UNKNOWN_FRAMEWORK
        assert result.text == "Unknown framework: bootstrap"

    def test_coordinates_outside_root_are_not_read(self, library, components_root):
        (components_root.parent / "secret.html").write_text("top secret")

        result = library.get_component("hyperui", "..", "..", "secret")

        assert result.status is ResultStatus.NOT_FOUND
        assert "top secret" not in result.text

    def test_unreadable_file_is_not_found(self, library, monkeypatch):
        def deny(path):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(library_module, "read_text", deny)

        result = library.get_component("hyperui", "application", "badges", "1")

        assert result.status is ResultStatus.NOT_FOUND
        assert result.text == "Component not found."


# =============================================================================
# search
# =============================================================================


class TestSearch:
    """Tests for ComponentLibrary.search."""

    def test_lists_matches(self, library):
        result = library.search("badges")

        assert result.status is ResultStatus.OK
        assert result.matches == [
            "hyperui/application/badges/1.html",
            "hyperui/application/badges/2.html",
        ]
        assert result.text == (
            '# Search: "badges"\n\n'
            "Found 2 results:\n\n"
            "- `hyperui/application/badges/1.html`\n"
            "- `hyperui/application/badges/2.html`"
        )

    def test_no_results(self, library):
        result = library.search("carousel")

        assert result.status is ResultStatus.NO_RESULTS
        assert result.text == 'No components found for "carousel". Try broader keywords.'

    def test_every_match_contains_every_term(self, library):
        result = library.search("html 1")

        assert result.matches
        for match in result.matches:
            assert "html" in match.lower()
            assert "1" in match.lower()

    def test_all_frameworks(self, library):
        assert library.search("simple", framework="all").matches == [
            "headlessui-react/dialog/simple.tsx",
            "headlessui-vue/dialog/simple.vue",
        ]

    def test_single_framework(self, library):
        assert library.search("simple", framework="headlessui-react").matches == [
            "headlessui-react/dialog/simple.tsx",
        ]

    def test_unknown_framework(self, library):
        result = library.search("simple", framework="../..")

        assert result.status is ResultStatus.UNKNOWN_FRAMEWORK

    def test_idempotent(self, library):
        assert library.search("1").matches == library.search("1").matches

    def test_respects_max_results(self, components_root):
        library = ComponentLibrary(build_catalog(components_root), max_results=1)

        assert library.search("badges").matches == ["hyperui/application/badges/1.html"]


# =============================================================================
# get_component_by_path
# =============================================================================


class TestGetComponentByPath:
    """Tests for ComponentLibrary.get_component_by_path."""

    def test_returns_source(self, library):
        result = library.get_component_by_path("headlessui-react/menu/dropdown.tsx")

        assert result.status is ResultStatus.OK
        assert result.syntax == "tsx"
        assert result.text == (
            "# dropdown.tsx\n\n```tsx\nexport default function Dropdown() {}\n```"
        )

    def test_reads_unindexed_files(self, library):
        result = library.get_component_by_path("hyperui/README.md")

        assert result.status is ResultStatus.OK
        assert result.syntax == "md"

    @pytest.mark.parametrize(
        "path",
        ["../../etc/passwd", "hyperui/../../secret.html", "/etc/passwd", ""],
    )
    def test_rejects_unsafe_paths_without_reading(self, library, monkeypatch, path):
        def fail(*args, **kwargs):
            raise AssertionError("filesystem accessed")

        monkeypatch.setattr(library_module, "read_text", fail)
        monkeypatch.setattr(Path, "is_file", fail)

        result = library.get_component_by_path(path)

        assert result.status is ResultStatus.INVALID_PATH
        assert result.text == "Invalid path."

    def test_missing_file(self, library):
        result = library.get_component_by_path("hyperui/application/badges/99.html")

        assert result.status is ResultStatus.NOT_FOUND
        assert result.text == "File not found: hyperui/application/badges/99.html"

    def test_directory_is_not_found(self, library):
        result = library.get_component_by_path("hyperui/application")

        assert result.status is ResultStatus.NOT_FOUND

    def test_unreadable_file_is_not_found(self, library, monkeypatch):
        def deny(path):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(library_module, "read_text", deny)

        result = library.get_component_by_path("hyperui/application/badges/1.html")

        assert result.status is ResultStatus.NOT_FOUND
        assert result.text == "File not found: hyperui/application/badges/1.html"


# =============================================================================
# Lower-level lookups
# =============================================================================


class TestLookups:
    """Tests for the exception-raising lookups."""

    def test_resolve_unknown_framework_raises(self, library):
        with pytest.raises(UnknownFrameworkError) as exc_info:
            library.resolve_component("bootstrap", "a", "b", "c")
        assert exc_info.value.framework == "bootstrap"

    def test_read_component_file_invalid(self, library):
        with pytest.raises(InvalidPathError):
            library.read_component_file("../x.html")

    def test_read_component_file_missing(self, library):
        with pytest.raises(ComponentNotFoundError) as exc_info:
            library.read_component_file("hyperui/nope.html")
        assert exc_info.value.path == "hyperui/nope.html"

    def test_every_indexed_variant_resolves(self, library):
        for framework_id, entry in library.catalog.frameworks.items():
            for category_name, category in entry.categories.items():
                for type_name, variants in category.types.items():
                    for variant in variants:
                        assert library.resolve_component(
                            framework_id, category_name, type_name, variant
                        ) is not None


def test_query_result_str():
    """Test that a result renders as its text."""
    result = QueryResult(status=ResultStatus.NOT_FOUND, text="Component not found.")

    assert str(result) == "Component not found."
    assert result.is_error
