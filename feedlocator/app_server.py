from typing import Any, Dict

import uvicorn
from fastapi import FastAPI, HTTPException

from feedlocator.feed_utils import discover_feed, find_feeds
from feedlocator.main.config import Config
from feedlocator.main.logging_config import configure_logging
from feedlocator.main.tools.client import ClientError
from feedlocator.main.tools.parsers import ParserError
from feedlocator.main.tools.reader import SubscriptionNotFoundError, UnsupportedFeedFormatError

app = FastAPI(
    title="feedlocator API",
    description="Resolve a site or feed URL into a downloaded, classified feed.",
    version="0.1.0",
    docs_url="/docs",        # Swagger UI
    redoc_url="/redoc",      # ReDoc UI
    openapi_url="/openapi.json",
)


@app.get("/", tags=["Root"], summary="API root")
async def read_root():
    return {"message": "Welcome to the feedlocator FastAPI server!"}


@app.post(
    "/discoverFeed",
    tags=["Feed"],
    summary="Discover a feed",
    description=(
        "Download ``site_url``; if it is not a feed, follow the first RSS/Atom "
        "autodiscovery link. ``etag`` and ``last_modified`` make the request conditional."
    ),
)
def discover_feed_endpoint(site_url: str, etag: str = "", last_modified: str = "") -> Dict[str, Any]:
    try:
        return discover_feed(site_url, etag=etag, last_modified=last_modified)
    except SubscriptionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except (UnsupportedFeedFormatError, ParserError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except ClientError as exc:
        raise HTTPException(status_code=502, detail=str(exc))


@app.get(
    path="/findFeeds",
    tags=["Feed"],
    summary="List advertised feeds",
    description="Return every feed URL advertised by ``<link>`` tags on ``site_url``.",
)
def find_feeds_endpoint(site_url: str) -> Dict[str, Any]:
    try:
        feeds = find_feeds(site_url)
    except ClientError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return {"site_url": site_url, "feeds": feeds}


def main():
    configure_logging(Config.from_env().log_level)
    # bind to localhost interface
    uvicorn.run(app, host="127.0.0.1", port=8090)


if __name__ == "__main__":
    main()
