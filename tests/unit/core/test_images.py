"""Unit tests for core/images.py"""

import pytest

from mdprep.core.images import extract_image_urls


def test_relative_markdown_image():
    images = extract_image_urls("![](./local.png)")
    assert len(images) == 1
    assert images[0].url == "./local.png"
    assert images[0].line_number == 1
    assert images[0].is_absolute is False


def test_absolute_markdown_image():
    images = extract_image_urls("![](https://x/i.png)")
    assert [(i.url, i.is_absolute) for i in images] == [("https://x/i.png", True)]


def test_html_images_case_insensitive():
    """<img> tags match regardless of case and quote style."""
    md = "<IMG alt='a' SRC='/root.png'>\n<img src=\"HTTP://x/y.png\" />"
    images = extract_image_urls(md)
    assert [(i.url, i.line_number, i.is_absolute) for i in images] == [
        ("/root.png", 1, False),
        ("HTTP://x/y.png", 2, True),
    ]


def test_multiple_per_line_in_order():
    """Markdown images on a line come first, then HTML images, then the next line."""
    md = '<img src="c.png"> ![a](a.png) ![b](https://b/b.png)\n![d](d.png)'
    images = extract_image_urls(md)
    assert [(i.url, i.line_number) for i in images] == [
        ("a.png", 1), ("https://b/b.png", 1), ("c.png", 1), ("d.png", 2),
    ]


def test_url_trimmed_and_empty():
    images = extract_image_urls("![x]( https://a/b.png )\n![y]()")
    assert images[0].url == "https://a/b.png"
    assert images[0].is_absolute
    assert images[1].url == ""
    assert images[1].is_absolute is False


@pytest.mark.parametrize("md", [None, "", "no images [just a link](https://x)"])
def test_no_images(md):
    assert extract_image_urls(md) == []
