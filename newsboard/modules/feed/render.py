import html
import logging
from collections.abc import Callable, Sequence

from newsboard.modules.headlines.schemas import DisplayArticle

logger = logging.getLogger(__name__)

RevealHook = Callable[[DisplayArticle], None]


def card_html(article: DisplayArticle) -> str:
    title = html.escape(article.title)
    parts = [
        '<div class="post-card zoom-in news-card">',
        f'  <div class="post-id">Article #{article.ordinal}</div>',
    ]
    if article.image_url:
        parts.append(
            f'  <div class="news-image"><img src="{html.escape(article.image_url)}" '
            'alt="News image" onerror="this.parentElement.style.display=\'none\'"></div>'
        )
    parts += [
        f'  <h2 class="post-title">{title}</h2>',
        '  <div class="news-info">',
        '    <div class="news-meta">',
        f'      <span class="source">{html.escape(article.source_name)}</span>',
        f'      <span class="date">{html.escape(article.published_date)}</span>',
        "    </div>",
        f'    <p class="news-description">{html.escape(article.description)}</p>',
    ]
    if article.article_url:
        parts.append(
            f'    <a href="{html.escape(article.article_url)}" target="_blank" '
            'rel="noopener noreferrer" class="read-more-btn">Read Full Article</a>'
        )
    parts += ["  </div>", "</div>"]
    return "\n".join(parts)


class CardRenderer:
    """Holds the displayed card collection and swaps it wholesale."""

    def __init__(self, on_insert: RevealHook | None = None) -> None:
        self._cards: tuple[DisplayArticle, ...] = ()
        self._on_insert = on_insert

    @property
    def cards(self) -> tuple[DisplayArticle, ...]:
        return self._cards

    def render(self, articles: Sequence[DisplayArticle]) -> None:
        self._cards = tuple(articles)
        if self._on_insert is not None:
            for card in self._cards:
                self._on_insert(card)
        logger.info("Displayed %d news articles", len(self._cards))

    def clear(self) -> None:
        self._cards = ()

    def to_html(self) -> str:
        return "\n".join(card_html(card) for card in self._cards)
