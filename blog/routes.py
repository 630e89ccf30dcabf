from flask import Blueprint, current_app, send_from_directory
from werkzeug.routing import IntegerConverter

from blog.pages import render_page
from crud import get_post_by_id, get_posts_latest, get_summary_latest
from models import GroupContent

main_bp = Blueprint('main', __name__)

LATEST_POSTS = 5
BROWSE_LIMIT = 1000


class PostIdConverter(IntegerConverter):
    """Signed 32-bit post ids; anything outside the range falls through to a 404."""

    def __init__(self, map):
        super().__init__(map, signed=True, min=-2**31, max=2**31 - 1)


def _policy():
    return current_app.config["STORAGE_ERROR_POLICY"]


@main_bp.route("/")
def home():
    posts = get_posts_latest(LATEST_POSTS, on_error=_policy())  # latest 5 posts
    return render_page(GroupContent(items=posts), "blog")


@main_bp.route("/<post_id:post_id>")
def read_post(post_id):
    posts = get_post_by_id(post_id, on_error=_policy())
    return render_page(GroupContent(items=posts), "blog")


@main_bp.route("/browse")
def browse():
    summaries = get_summary_latest(BROWSE_LIMIT, on_error=_policy())
    return render_page(GroupContent(items=summaries), "browse")


# GET /res/<path> - missing files and paths outside RESOURCE_DIR are 404
@main_bp.route("/res/<path:filename>")
def resource(filename):
    return send_from_directory(current_app.config["RESOURCE_DIR"], filename)
