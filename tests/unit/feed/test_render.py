"""Tests for newsboard.modules.feed.render."""

from newsboard.modules.feed.render import CardRenderer, card_html
from newsboard.modules.headlines.normalizer import normalize
from newsboard.modules.headlines.schemas import DisplayArticle


def _article(ordinal: int, **overrides) -> DisplayArticle:
    fields = {
        "ordinal": ordinal,
        "title": f"Title {ordinal}",
        "description": "Desc",
        "source_name": "BBC",
        "published_date": "3/5/2024",
        "article_url": f"https://bbc.com/{ordinal}",
        "image_url": None,
    }
    fields.update(overrides)
    return DisplayArticle(**fields)


class TestCardRenderer:
    def test_render_keeps_input_order(self) -> None:
        renderer = CardRenderer()
        articles = [_article(i) for i in range(1, 6)]

        renderer.render(articles)

        assert [c.ordinal for c in renderer.cards] == [1, 2, 3, 4, 5]

    def test_render_replaces_whole_collection(self) -> None:
        renderer = CardRenderer()
        renderer.render([_article(1), _article(2)])

        renderer.render([_article(1, title="Fresh")])

        assert [c.title for c in renderer.cards] == ["Fresh"]

    def test_each_new_card_is_exposed_to_reveal_hook(self) -> None:
        revealed: list[int] = []
        renderer = CardRenderer(on_insert=lambda card: revealed.append(card.ordinal))

        renderer.render([_article(1), _article(2), _article(3)])

        assert revealed == [1, 2, 3]

    def test_clear(self) -> None:
        renderer = CardRenderer()
        renderer.render([_article(1)])

        renderer.clear()

        assert renderer.cards == ()
        assert renderer.to_html() == ""

    def test_html_has_one_card_per_article(self) -> None:
        renderer = CardRenderer()
        renderer.render([_article(1), _article(2)])

        html = renderer.to_html()

        assert html.count('class="post-card zoom-in news-card"') == 2
        assert html.index("Article #1") < html.index("Article #2")


class TestCardHtml:
    def test_escapes_provider_text(self) -> None:
        html = card_html(_article(1, title="<script>alert(1)</script>", source_name="A&B"))

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "A&amp;B" in html

    def test_image_shown_only_when_present(self) -> None:
        assert "news-image" not in card_html(_article(1))
        assert 'src="https://img.test/a.jpg"' in card_html(
            _article(1, image_url="https://img.test/a.jpg")
        )

    def test_link_suppressed_without_url(self) -> None:
        html = card_html(normalize({"title": "No link"}, 1))

        assert "read-more-btn" not in html
        assert "No link" in html
        assert "Invalid Date" in html
