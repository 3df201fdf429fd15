"""
Tests for single post pages
"""

from app.models.post import PostStatus
from utils.mock_utils import create_test_magician, create_test_post


class TestMagicianPage:
    async def test_renders_plugin_template(self, client, test_db):
        other = await create_test_magician(test_db, "Tobias", slug="tobias")
        await create_test_magician(
            test_db,
            "Gob Bluth",
            slug="gob",
            body=f'My best trick is a trick for money. See also [magician id="{other.id}"].',
            thumbnail_url="https://example.com/gob.jpg",
        )

        response = await client.get("/alliance-approved-magician/gob/")

        assert response.status_code == 200
        html = response.text
        assert 'class="magician type-magician status-published"' in html
        assert "My best illusion is a trick for money." in html
        assert '<a href="http://localhost:8000/alliance-approved-magician/tobias/">Tobias</a>' in html
        assert 'class="attachment-medium size-medium wp-post-image"' in html

    async def test_title_escaped(self, client, test_db):
        await create_test_magician(test_db, "<b>Gob</b>", slug="gob")
        response = await client.get("/alliance-approved-magician/gob/")
        assert "<b>Gob</b>" not in response.text
        assert "&lt;b&gt;Gob&lt;/b&gt;" in response.text

    async def test_draft_is_not_found(self, client, test_db):
        await create_test_magician(test_db, "Gob Bluth", slug="gob", status=PostStatus.DRAFT)
        response = await client.get("/alliance-approved-magician/gob/")
        assert response.status_code == 404
        assert response.json()["error"]["type"] == "Not Found"


class TestGenericPage:
    async def test_post_uses_theme_single(self, client, test_db):
        post = await create_test_post(test_db, "Hello", slug="hello", body="A card trick")
        response = await client.get("/posts/hello/")
        assert response.status_code == 200
        assert f'id="post-{post.id}"' in response.text
        assert "magician type-magician" not in response.text
        assert "A card illusion" in response.text

    async def test_unknown_url_base(self, client):
        response = await client.get("/nothing-here/hello/")
        assert response.status_code == 404
        assert response.json()["error"]["details"]["resource_type"] == "Post"

    async def test_wrong_type_under_magician_base(self, client, test_db):
        await create_test_post(test_db, "Hello", slug="hello")
        response = await client.get("/alliance-approved-magician/hello/")
        assert response.status_code == 404


class TestOutputActions:
    async def test_content_rendered_between_output_actions(self, client, test_db):
        from app.plugins.base import PluginBase, PluginMeta
        from app.plugins.hooks import FILTER_CONTENT_RENDER, HOOK_MAGICIAN_AFTER_OUTPUT, HOOK_MAGICIAN_BEFORE_OUTPUT
        from app.plugins.registry import plugin_registry

        events = []

        class OrderPlugin(PluginBase):
            @property
            def meta(self) -> PluginMeta:
                return PluginMeta(
                    name="order",
                    version="1.0.0",
                    description="d",
                    hooks=[HOOK_MAGICIAN_BEFORE_OUTPUT, HOOK_MAGICIAN_AFTER_OUTPUT],
                    filters=[FILTER_CONTENT_RENDER],
                )

            async def handle_hook(self, hook_name, payload):
                events.append(hook_name)
                return f"<!-- {hook_name} -->"

            async def apply_filter(self, filter_name, value, payload):
                events.append(filter_name)
                return value

        await create_test_magician(test_db, "Gob Bluth", slug="gob", body="Hello")
        plugin_registry.register(OrderPlugin())
        try:
            response = await client.get("/alliance-approved-magician/gob/")
        finally:
            await plugin_registry.unregister("order")

        assert events == [HOOK_MAGICIAN_BEFORE_OUTPUT, FILTER_CONTENT_RENDER, HOOK_MAGICIAN_AFTER_OUTPUT]
        html = response.text
        assert html.index(HOOK_MAGICIAN_BEFORE_OUTPUT) < html.index("Hello") < html.index(HOOK_MAGICIAN_AFTER_OUTPUT)

    async def test_no_output_actions_for_generic_posts(self, client, test_db):
        from app.plugins.base import PluginBase, PluginMeta
        from app.plugins.hooks import HOOK_MAGICIAN_BEFORE_OUTPUT
        from app.plugins.registry import plugin_registry

        fired = []

        class BeforePlugin(PluginBase):
            @property
            def meta(self) -> PluginMeta:
                return PluginMeta(name="before", version="1.0.0", description="d", hooks=[HOOK_MAGICIAN_BEFORE_OUTPUT])

            async def handle_hook(self, hook_name, payload):
                fired.append(payload)

        await create_test_post(test_db, "Hello", slug="hello")
        plugin_registry.register(BeforePlugin())
        try:
            await client.get("/posts/hello/")
        finally:
            await plugin_registry.unregister("before")

        assert fired == []
