import logging
import posixpath
import re
from typing import Optional

import trafilatura
from lxml import html as lxml_html
from markdownify import ATX, MarkdownConverter
from readability import Document

from docs_fetch.errors import ExtractionError
from docs_fetch.models import (
    ContentFormat,
    ExtractedArticle,
    FetchedDocument,
    ProcessingTier,
)

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = (".md", ".mdx")

LANGUAGE_CLASS_PREFIX = "language-"


def _code_language(pre) -> Optional[str]:
    """Language named by a ``language-x`` class on a <pre> or its <code> child."""
    for node in (pre, pre.find("code")):
        if node is None:
            continue
        for css_class in node.get("class") or []:
            if css_class.startswith(LANGUAGE_CLASS_PREFIX):
                return css_class[len(LANGUAGE_CLASS_PREFIX):]
    return None


_converter = MarkdownConverter(heading_style=ATX, code_language_callback=_code_language)


def minify_html(html: str) -> str:
    """Collapse whitespace runs and drop whitespace between tags (lossy)."""
    html = re.sub(r"\s+", " ", html)
    html = re.sub(r">\s+<", "><", html)
    return html.strip()


def is_markdown_url(url: str) -> bool:
    return url.endswith(MARKDOWN_EXTENSIONS)


def extract_article(html: str) -> ExtractedArticle:
    """
    Run readability over a page and return its main content.

    The title comes from readability, falling back to trafilatura's page
    metadata (og:title, h1, ...).

    Raises:
        ExtractionError: if readability finds no text.
    """
    doc = Document(html)
    content = doc.summary(html_partial=True)

    if not content or not lxml_html.fromstring(content).text_content().strip():
        raise ExtractionError("Readability returned no content")

    title = doc.short_title().strip() or _metadata_title(html)
    return ExtractedArticle(content=content, title=title or None)


def _metadata_title(html: str) -> Optional[str]:
    try:
        metadata = trafilatura.extract_metadata(html)
    except Exception as e:
        logger.warning("    trafilatura metadata failed: %s", e)
        return None
    if metadata is None or not metadata.title:
        return None
    return metadata.title.strip()


def convert_to_markdown(html: str) -> str:
    """Convert HTML to Markdown with ATX headings and fenced code blocks."""
    return _converter.convert(html).strip()


def process_html(html: str) -> FetchedDocument:
    """
    Turn an HTML page into the best available document.

    Order:
    1. readability extraction -> on failure, original HTML (minified), no title
    2. markdown conversion    -> on failure, extracted HTML (minified), title kept
    3. markdown, with the title as an H1 when one was found
    """

    # 1. Extract main content
    try:
        article = extract_article(html)
    except Exception as e:
        logger.warning("    Readability failed, using original HTML: %s", e)
        return FetchedDocument(
            content=minify_html(html),
            format=ContentFormat.HTML,
            tier=ProcessingTier.ORIGINAL,
        )

    # 2. Convert to markdown
    try:
        markdown = convert_to_markdown(article.content)
    except Exception as e:
        logger.warning("    Markdown conversion failed, using Readability HTML: %s", e)
        return FetchedDocument(
            content=minify_html(article.content),
            format=ContentFormat.HTML,
            tier=ProcessingTier.EXTRACTED,
            title=article.title,
        )

    # 3. Success
    if article.title:
        markdown = f"# {article.title}\n\n{markdown}"

    return FetchedDocument(
        content=markdown,
        format=ContentFormat.MARKDOWN,
        tier=ProcessingTier.CONVERTED,
        title=article.title,
    )


def process_content(url: str, raw: str) -> FetchedDocument:
    """Pass Markdown sources through verbatim; run HTML through the ladder."""
    if is_markdown_url(url):
        logger.info("  Raw markdown")
        return FetchedDocument(
            content=raw,
            format=ContentFormat.MARKDOWN,
            tier=ProcessingTier.PASSTHROUGH,
            extension=posixpath.splitext(url)[1],
        )

    logger.info("  Processing HTML")
    document = process_html(raw)
    logger.info("    Output: %s", document.format.value)
    return document
