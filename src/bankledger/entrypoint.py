"""Server entrypoint; starts uvicorn with host and port from env."""
import os

import uvicorn

from bankledger.main import app


def main() -> None:
    host = os.environ.get("BANKLEDGER_HOST", "0.0.0.0")
    port = int(os.environ.get("BANKLEDGER_PORT", "8000"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
