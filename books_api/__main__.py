"""Run the Books API with uvicorn: python -m books_api"""

import uvicorn

from books_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("books_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
