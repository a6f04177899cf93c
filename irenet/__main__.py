"""Run the API with uvicorn: `python -m irenet` (honours HOST and PORT)."""

import uvicorn

from irenet.config import settings


def main() -> None:
    uvicorn.run("irenet.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
