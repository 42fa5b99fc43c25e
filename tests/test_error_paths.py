"""Error-path and malformed input tests.

Configuration and registration errors raise Casillas exceptions. The
render pass itself absorbs every structural anomaly.
"""

import logging
from types import SimpleNamespace

import pytest
from markdown_it import MarkdownIt
from markdown_it.ruler import Ruler

from casillas import (
    DEFAULT_CONFIG,
    CasillasError,
    ConfigError,
    PluginError,
    TaskListConfig,
    TaskListRule,
    create_markdown,
    tasklists_plugin,
)

# =========================================================================
# Exception construction and hierarchy
# =========================================================================


class TestErrors:
    def test_config_error_format(self) -> None:
        err = ConfigError("list_class", "must contain at least one class name")
        assert str(err) == "Option 'list_class': must contain at least one class name"
        assert err.option == "list_class"
        assert isinstance(err, CasillasError)

    def test_plugin_error_format(self) -> None:
        err = PluginError("github-task-lists", "core rule 'inline' not found")
        assert "github-task-lists" in str(err)
        assert err.plugin_name == "github-task-lists"
        assert isinstance(err, CasillasError)


# =========================================================================
# Registration failures
# =========================================================================


class TestRegistrationErrors:
    def test_invalid_option_type(self) -> None:
        with pytest.raises(ConfigError):
            create_markdown(enabled="true")

    def test_unknown_keyword_option(self) -> None:
        with pytest.raises(ConfigError):
            create_markdown(labell=True)

    def test_unknown_dict_option(self) -> None:
        """Misspelled keys in an options dict fail like keyword overrides do."""
        with pytest.raises(ConfigError) as exc_info:
            create_markdown(options={"labell": True})
        assert exc_info.value.option == "labell"

    def test_unknown_camel_case_option(self) -> None:
        with pytest.raises(ConfigError):
            MarkdownIt().use(tasklists_plugin, {"listclass": "todo"})

    def test_shared_options_dict_via_lenient_from_dict(self) -> None:
        shared = {"enabled": True, "linkify": True}
        md = MarkdownIt().use(tasklists_plugin, TaskListConfig.from_dict(shared))
        assert "disabled" not in md.render("- [ ] x\n")

    def test_engine_without_inline_rule(self) -> None:
        fake_md = SimpleNamespace(core=SimpleNamespace(ruler=Ruler()))
        with pytest.raises(PluginError):
            tasklists_plugin(fake_md)


# =========================================================================
# Malformed input never fails a render
# =========================================================================


class TestMalformedInput:
    @pytest.mark.parametrize(
        "source",
        [
            "- [ ]\n",
            "- [x]\n",
            "- [\n",
            "- []\n",
            "-\n",
            "- \n  - [ ] only nested\n",
            "* [ ] star\n+ [x] plus\n",
            "- [ ] \n",
            "> - [ ] quoted list\n",
            "- [x] [link](https://example.com)\n",
            "[x]: https://example.com\n\n- [x] reference\n",
        ],
    )
    def test_renders(self, md, source: str) -> None:
        assert isinstance(md.render(source), str)

    def test_marker_without_text_is_literal(self, md) -> None:
        html = md.render("- [ ]\n")
        assert "<input" not in html
        assert "[ ]" in html

    def test_other_bullets(self, md) -> None:
        html = md.render("* [ ] star\n\n+ [x] plus\n")
        assert html.count('<ul class="contains-task-list">') == 2

    def test_list_inside_blockquote(self, md) -> None:
        html = md.render("> - [ ] quoted list\n")
        assert html.count('type="checkbox"') == 1

    def test_reference_link_marker_is_skipped(self, md) -> None:
        """``[x]`` resolving to a link leaves no text child to strip."""
        html = md.render("[x]: https://example.com\n\n- [x] reference\n")
        assert "<input" not in html
        assert '<a href="https://example.com">x</a>' in html

    def test_rule_on_empty_stream(self) -> None:
        assert TaskListRule(DEFAULT_CONFIG).run([]) == 0


class TestLogging:
    def test_debug_summary(self, md, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="casillas")
        md.render("- [ ] a\n- [x] b\n")
        assert "Rendered 2 task list item(s)" in caplog.text

    def test_silent_without_matches(self, md, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="casillas")
        md.render("- a\n")
        assert not [r for r in caplog.records if r.name.startswith("casillas")]
