"""
Jinja2 environment shared by the HTML endpoints
"""

import re

from fastapi.templating import Jinja2Templates
from markupsafe import Markup, escape

from newsdesk.core.config import settings


PARAGRAPH_BREAK = re.compile(r"\r?\n\s*\r?\n")


def simple_format(text) -> Markup:
    """Wrap blank-line separated blocks in <p> and turn single newlines into <br>."""
    if not text:
        return Markup("")
    paragraphs = [
        escape(block).replace("\n", Markup("<br>\n"))
        for block in PARAGRAPH_BREAK.split(str(text).strip())
    ]
    return Markup("\n").join(Markup("<p>{}</p>").format(p) for p in paragraphs)


templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)
templates.env.filters["simple_format"] = simple_format
