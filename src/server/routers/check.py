"""Check and table of contents endpoints for the API."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from server.models import CheckRequest, ErrorResponse, TocRequest
from server.query_processor import process_check, process_toc

router = APIRouter()

COMMON_RESPONSES: dict[int | str, dict] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Document could not be loaded"},
}


def _to_json(response) -> JSONResponse:
    if isinstance(response, ErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))


@router.post("/api/check", responses=COMMON_RESPONSES)
async def api_check(check_request: CheckRequest) -> JSONResponse:
    """Check a markdown document and return the report.

    **Runs the anchor consistency, prose, SQL snippet and section count
    checks** on the document named by ``source``, sent as ``content``, or
    on the bundled document when neither is given.

    **Returns**

    - **JSONResponse**: the report on success (even when checks fail),
      or a 400 with an error message when the document cannot be loaded

    """
    return _to_json(await process_check(check_request))


@router.post("/api/toc", responses=COMMON_RESPONSES)
async def api_toc(toc_request: TocRequest) -> JSONResponse:
    """Generate the table of contents for a document.

    **Returns**

    - **JSONResponse**: the generated list and the rewritten document, or a
      400 with an error message when the document cannot be loaded

    """
    return _to_json(await process_toc(toc_request))
