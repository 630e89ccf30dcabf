from flask import current_app, render_template

from crud import get_sidebar_summary
from models import PageContext


def render_page(content, parent: str, template_name: str = "index") -> str:
    """Render ``content`` inside the ``parent`` section of a full page.

    The sidebar is fetched again on every call.
    """
    summaries = get_sidebar_summary(on_error=current_app.config["STORAGE_ERROR_POLICY"])
    page = PageContext(content=content, summaries=summaries, parent=parent)
    return render_template(
        f"{template_name}.html",
        content=page.content,
        summaries=page.summaries,
        parent=page.parent,
    )
