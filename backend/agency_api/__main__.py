"""Run the API under uvicorn: `python -m agency_api` (or the `agency-api` script)."""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "agency_api.main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "3000")),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
