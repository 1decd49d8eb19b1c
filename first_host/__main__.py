"""Run the API with Uvicorn: python -m first_host"""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "first_host.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
