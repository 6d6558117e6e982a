# backend/tests/test_blog_renderer.py

from notion_blog.blog.config import BlogConfig
from notion_blog.blog.renderer import BlogRenderer, format_timestamp, render_content
from notion_blog.blog.schemas import CodeContent, Post, PostListProps, PostProps, TextContent


def test_render_text_contents():
    assert str(render_content(TextContent(type="heading_2", text="H2"), "p_0")) == (
        '<h2 data-key="p_0" class="heading2">H2</h2>'
    )
    assert str(render_content(TextContent(type="heading_3", text="H3"), "p_1")).startswith("<h3 ")
    assert str(render_content(TextContent(type="paragraph", text="P"), "p_2")).startswith("<p ")
    assert str(render_content(TextContent(type="quote", text="Q"), "p_3")).startswith(
        "<blockquote "
    )


def test_render_code_content_uses_language_class():
    html = str(render_content(CodeContent(text="print(1)", language="python"), "p_0"))

    assert html == (
        '<pre data-key="p_0" class="code lang-python"><code>print(1)</code></pre>'
    )


def test_render_content_escapes_text():
    html = str(render_content(TextContent(type="paragraph", text="<script>x</script>")))

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_render_content_with_none_text():
    html = str(render_content(TextContent(type="paragraph", text=None), "k"))

    assert html == '<p data-key="k" class="paragraph"></p>'


def test_format_timestamp_converts_to_timezone():
    assert format_timestamp("2023-01-01T00:00:00.000Z", "Asia/Tokyo") == "2023-01-01 09:00:00"
    assert format_timestamp("2023-01-01T00:00:00.000Z", "UTC") == "2023-01-01 00:00:00"


def test_format_timestamp_invalid_values():
    assert format_timestamp(None) == ""
    assert format_timestamp("not-a-date") == ""


def _post() -> Post:
    return Post(
        id="page-1",
        title="Hello",
        slug="hello",
        created_ts="2023-01-01T00:00:00.000Z",
        last_edited_ts="2023-01-02T00:00:00.000Z",
        contents=[
            TextContent(type="heading_2", text="Intro"),
            CodeContent(text="x = 1", language="python"),
        ],
    )


def test_render_post_page():
    renderer = BlogRenderer(BlogConfig(title="My Blog", timezone="Asia/Tokyo"))

    html = renderer.render_post(PostProps(post=_post()))

    assert "<title>Hello | My Blog</title>" in html
    assert '<h1 class="title">Hello</h1>' in html
    assert "作成日時: 2023-01-01 09:00:00" in html
    assert "更新日時: 2023-01-02 09:00:00" in html
    assert 'data-key="page-1_0"' in html
    assert 'class="code lang-python"' in html
    assert html.index("Intro") < html.index("x = 1")


def test_render_post_page_without_post():
    renderer = BlogRenderer(BlogConfig(title="My Blog"))

    html = renderer.render_post(PostProps(post=None))

    assert "<title>My Blog</title>" in html
    assert 'class="post"' not in html


def test_render_post_with_null_fields():
    renderer = BlogRenderer(BlogConfig())

    html = renderer.render_post(PostProps(post=Post(id="page-1")))

    assert '<h1 class="title"></h1>' in html


def test_render_index_lists_all_posts():
    renderer = BlogRenderer(BlogConfig())
    second = Post(id="page-2", title="Second")

    html = renderer.render_index(PostListProps(posts=[_post(), second], revalidate=60))

    assert html.count('class="post"') == 2
    assert html.index("Hello") < html.index("Second")
