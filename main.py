from dotenv import load_dotenv

load_dotenv()

from authwidget.server import create_app  # noqa: E402

app = create_app()
