"""cookielogin entrypoint.

Run with:
  python -m cookielogin
"""

import logging
import os
import uvicorn

logger = logging.getLogger("cookielogin")


def main() -> None:
    host = os.getenv("COOKIELOGIN_HOST", "127.0.0.1")
    port = int(os.getenv("COOKIELOGIN_PORT", "3000"))
    reload = os.getenv("COOKIELOGIN_RELOAD", "false").lower() in {"1", "true", "yes", "y"}
    log_level = os.getenv("COOKIELOGIN_LOG_LEVEL", "info").lower()
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        uvicorn.run("cookielogin.app:app", host=host, port=port, reload=reload, log_level=log_level)
    except Exception:
        logger.exception("Server failed to start on %s:%s", host, port)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
