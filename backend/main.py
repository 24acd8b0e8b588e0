from __future__ import annotations

import sys
from pathlib import Path

if not __package__:
    sys.path.append(str(Path(__file__).resolve().parent))
    from flowarchive import create_app
    from flowarchive.core.logging_config import configure_logging
    from flowarchive.core.settings import get_settings
else:
    from .flowarchive import create_app
    from .flowarchive.core.logging_config import configure_logging
    from .flowarchive.core.settings import get_settings

settings = get_settings()
configure_logging(settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)
