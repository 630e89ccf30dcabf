# main.py
import os
import logging

from dotenv import load_dotenv

# local imports
from blog.site import create_app
from database import create_tables, engine

# Setup
load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(message)s",
)
logger = logging.getLogger("blog")

app = create_app()


def run():
    # Ensure table exists
    create_tables(engine)
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 8000))
    logger.info("Serving blog from %s on %s:%d", engine.url.render_as_string(hide_password=True), host, port)
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    run()
