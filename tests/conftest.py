"""
Pytest configuration and fixtures for frontend-components tests.
"""

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from frontend_components.catalog import ComponentLibrary, build_catalog

# Relative path -> content for a component root covering every layout.
# daisyui is intentionally absent.
COMPONENT_FILES = {
    "hyperui/application/badges/1.html": '<span class="badge">One</span>',
    "hyperui/application/badges/2.html": '<span class="badge">Two</span>',
    "hyperui/application/buttons/1-dark.html": '<button class="dark">Dark</button>',
    "hyperui/marketing/banners/1.html": "<section>Banner</section>",
    "hyperui/marketing/cta/notes.txt": "not a component",
    "hyperui/README.md": "# HyperUI",
    "headlessui-react/dialog/simple.tsx": "export default function Simple() {}",
    "headlessui-react/menu/dropdown.tsx": "export default function Dropdown() {}",
    "headlessui-react/menu/notes.md": "ignored",
    "headlessui-vue/dialog/simple.vue": "<template><div /></template>",
    "flyonui/css/button.css": ".btn { }",
    "flyonui/css/card.css": ".card { }",
    "flyonui/plugins/accordion/index.ts": "export class Accordion {}",
    "flyonui/plugins/accordion/variants.css": ".accordion { }",
    "flyonui/plugins/select/index.ts": "export class Select {}",
    "flyonui/plugins/select/helpers.css": ".select { }",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create files under root from a relative path -> content mapping."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment and cwd out of configuration lookups."""
    monkeypatch.delenv("CLAUDE_PLUGIN_ROOT", raising=False)
    for key in list(os.environ):
        if key.startswith("FRONTEND_COMPONENTS_"):
            monkeypatch.delenv(key, raising=False)

    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)


@pytest.fixture
def make_tree():
    """Provide a helper that writes a component tree."""
    return write_tree


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def components_root(tmp_path: Path) -> Path:
    """Provide a component root with hyperui, headlessui and flyonui."""
    return write_tree(tmp_path / "components", COMPONENT_FILES)


@pytest.fixture
def library(components_root: Path) -> ComponentLibrary:
    """Provide a library over the sample component root."""
    return ComponentLibrary(build_catalog(components_root))
