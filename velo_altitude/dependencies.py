"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from velo_altitude.models.database import get_db
from velo_altitude.services.browse_service import BrowseService
from velo_altitude.services.catalog_service import CatalogService
from velo_altitude.services.data_service import ContentClient
from velo_altitude.utils.auth import Viewer, get_current_viewer


def get_content_client(request: Request) -> ContentClient:
    """Content backend client sharing the application's HTTP connection pool."""
    return ContentClient(request.app.state.http_client)


# Type aliases for common dependencies
DbSession = Annotated[Session, Depends(get_db)]
CurrentViewer = Annotated[Viewer, Depends(get_current_viewer)]
ContentApi = Annotated[ContentClient, Depends(get_content_client)]


def get_browse_service(client: ContentApi, db: DbSession) -> BrowseService:
    return BrowseService(client, CatalogService(db))


Browser = Annotated[BrowseService, Depends(get_browse_service)]
