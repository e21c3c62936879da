"""Shared sample documents for core unit tests"""

import pytest


SAMPLE_FM_MD = """\
---
title: Front Matter Title
description: From the body
tags:
  - javascript
  - typescript
cover_image: https://example.com/cover.png
published: true
layout: post
---
# Heading

A first paragraph that says enough words to count as real prose content here.
"""

SAMPLE_LIQUID_MD = """\
# Embeds

{% youtube abc123 %}

{% details Click me %}
Hidden text with {% user alice %} inside.
{% enddetails %}

```
{% github not/converted %}
```

{% mystery thing %}
"""


@pytest.fixture(name="fm_doc")
def fm_doc_fixture():
    return SAMPLE_FM_MD


@pytest.fixture(name="liquid_doc")
def liquid_doc_fixture():
    return SAMPLE_LIQUID_MD
