"""
Server entry point.

Runs the API under uvicorn. Host and port come from DOCQA_HOST and PORT.

Dependencies: uvicorn, python-dotenv
System role: Process entry point
"""

import os

import uvicorn
from dotenv import load_dotenv


def main() -> None:
    """Start the API server."""
    load_dotenv()
    uvicorn.run(
        "docqa.api.main:app",
        host=os.getenv("DOCQA_HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
