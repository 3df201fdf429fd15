"""
Tests for shortcode parsing, expansion and the [magician] shortcode
"""

import pytest
from utils.mock_utils import create_test_magician

from app.constants.magicians import FEATURED_MAGICIAN_OPTION
from app.models.post import PostStatus
from app.plugins.base import PluginBase, PluginMeta
from app.plugins.hooks import FILTER_MAGICIAN_SHORTCODE
from app.plugins.registry import plugin_registry
from app.services.magician_service import MagicianSelector, render_magician_shortcode
from app.services.post_service import PostRepository
from app.services.shortcode_service import (
    ShortcodeRegistry,
    parse_shortcode_atts,
    shortcode_atts,
    shortcode_registry,
)


class TestParseShortcodeAtts:
    def test_double_quoted(self):
        assert parse_shortcode_atts(' id="5"') == {"id": "5"}

    def test_single_quoted_and_bare(self):
        assert parse_shortcode_atts(" id='5' size=large") == {"id": "5", "size": "large"}

    def test_names_lowercased(self):
        assert parse_shortcode_atts(' ID="5"') == {"id": "5"}

    def test_empty(self):
        assert parse_shortcode_atts("") == {}


class TestShortcodeAtts:
    def test_defaults_filled(self):
        assert shortcode_atts({"id": None}, {}) == {"id": None}

    def test_supplied_wins(self):
        assert shortcode_atts({"id": None}, {"id": "3"}) == {"id": "3"}

    def test_unknown_dropped(self):
        assert shortcode_atts({"id": None}, {"id": "3", "color": "red"}) == {"id": "3"}


def _echo_registry():
    registry = ShortcodeRegistry()

    async def echo(atts, context):
        return "<" + ",".join(f"{k}={v}" for k, v in sorted(atts.items())) + ">"

    registry.add("echo", echo)
    return registry


class TestDoShortcodes:
    async def test_expands_registered_tag(self):
        registry = _echo_registry()
        assert await registry.do_shortcodes('Hi [echo a="1"] there') == "Hi <a=1> there"

    async def test_no_attributes(self):
        assert await _echo_registry().do_shortcodes("[echo]") == "<>"

    async def test_self_closing(self):
        assert await _echo_registry().do_shortcodes("[echo /]") == "<>"

    async def test_unknown_tag_untouched(self):
        assert await _echo_registry().do_shortcodes("[gallery id=1] [echo]") == "[gallery id=1] <>"

    async def test_escaped_tag_rendered_literally(self):
        assert await _echo_registry().do_shortcodes("Use [[echo]] to echo") == "Use [echo] to echo"

    async def test_multiple(self):
        result = await _echo_registry().do_shortcodes("[echo x=1][echo x=2]")
        assert result == "<x=1><x=2>"

    async def test_no_brackets_short_circuits(self):
        assert await _echo_registry().do_shortcodes("plain text") == "plain text"

    async def test_context_passed_to_handler(self):
        registry = ShortcodeRegistry()

        async def who(atts, context):
            return context["name"]

        registry.add("who", who)
        assert await registry.do_shortcodes("[who]", {"name": "Gob"}) == "Gob"

    async def test_failing_handler_renders_nothing(self):
        registry = _echo_registry()

        async def broken(atts, context):
            msg = "handler exploded"
            raise RuntimeError(msg)

        registry.add("broken", broken)
        assert await registry.do_shortcodes("a [broken] b [echo x=1]") == "a  b <x=1>"

    async def test_remove(self):
        registry = _echo_registry()
        registry.remove("echo")
        assert not registry.has("echo")
        assert await registry.do_shortcodes("[echo]") == "[echo]"


class TestMagicianShortcode:
    """The [magician] handler over the real repository"""

    async def test_explicit_id(self, test_db, option_store, magician_plugin):
        magician = await create_test_magician(test_db, title="Gob Bluth", slug="gob")
        selector = MagicianSelector(PostRepository(test_db), option_store)

        html = await render_magician_shortcode({"id": str(magician.id)}, {"selector": selector})
        assert html == '<a href="http://localhost:8000/alliance-approved-magician/gob/">Gob Bluth</a>'

    async def test_featured_when_no_id(self, test_db, option_store, magician_plugin):
        await create_test_magician(test_db, title="Gob Bluth", slug="gob")
        featured = await create_test_magician(test_db, title="Tony Wonder", slug="tony")
        option_store.set(FEATURED_MAGICIAN_OPTION, featured.id)
        selector = MagicianSelector(PostRepository(test_db), option_store)

        html = await render_magician_shortcode({}, {"selector": selector})
        assert ">Tony Wonder</a>" in html

    async def test_nothing_when_not_found(self, test_db, option_store, magician_plugin):
        draft = await create_test_magician(test_db, status=PostStatus.DRAFT)
        selector = MagicianSelector(PostRepository(test_db), option_store)

        assert await render_magician_shortcode({"id": str(draft.id)}, {"selector": selector}) == ""
        assert await render_magician_shortcode({}, {"selector": selector}) == ""

    @pytest.mark.parametrize("requested", ["abc", "-{id}", "{id}abc", "{id}.9"])
    async def test_malformed_id_does_not_fall_back_to_featured(self, test_db, option_store, magician_plugin, requested):
        featured = await create_test_magician(test_db, title="Tony Wonder", slug="tony")
        option_store.set(FEATURED_MAGICIAN_OPTION, featured.id)
        selector = MagicianSelector(PostRepository(test_db), option_store)

        content = f'[magician id="{requested.format(id=featured.id)}"]'
        assert await shortcode_registry.do_shortcodes(content, {"selector": selector}) == ""

    async def test_missing_selector_renders_nothing(self, magician_plugin):
        assert await render_magician_shortcode({}, {}) == ""
        assert await shortcode_registry.do_shortcodes("before [magician] after") == "before  after"

    async def test_title_escaped(self, test_db, option_store, magician_plugin):
        magician = await create_test_magician(test_db, title="<b>Gob</b> & Co", slug="gob")
        selector = MagicianSelector(PostRepository(test_db), option_store)

        html = await render_magician_shortcode({"id": str(magician.id)}, {"selector": selector})
        assert "&lt;b&gt;Gob&lt;/b&gt; &amp; Co" in html

    async def test_output_filter_can_override(self, test_db, option_store, magician_plugin):
        class OverridePlugin(PluginBase):
            @property
            def meta(self):
                return PluginMeta(name="override", version="1.0.0", description="d", filters=[FILTER_MAGICIAN_SHORTCODE])

            async def apply_filter(self, filter_name, value, payload):
                return f"<span>{payload['magician'].title}|{payload['atts']['id']}</span>"

        magician = await create_test_magician(test_db, title="Gob", slug="gob")
        selector = MagicianSelector(PostRepository(test_db), option_store)
        plugin_registry.register(OverridePlugin())
        try:
            html = await render_magician_shortcode({"id": str(magician.id)}, {"selector": selector})
        finally:
            await plugin_registry.unregister("override")

        assert html == f"<span>Gob|{magician.id}</span>"


async def test_magician_tag_registered_by_plugin(magician_plugin):
    assert shortcode_registry.has("magician")
    await magician_plugin.on_unload()
    assert not shortcode_registry.has("magician")
