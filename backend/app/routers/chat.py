# app/routers/chat.py

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from ..controller import ChatController
from ...data import catalog
from ...data.database import get_db
from ...schemas.catalog_models import BranchDetail, ItemOut
from ...schemas.io_models import ChatRequest

router = APIRouter()

_controller = None

def get_chat_controller() -> ChatController:
    global _controller
    if _controller is None:
        _controller = ChatController()
    return _controller

@router.post("/chat")
def chat(request: ChatRequest, db: Session = Depends(get_db), controller: ChatController = Depends(get_chat_controller)):
    """Stream an assistant answer as server-sent events.

    The catalog is snapshotted before streaming starts, so the response never
    depends on the request's database session.
    """
    branch = catalog.get_branch_with_details(db, request.branch_id)
    snapshot = BranchDetail.model_validate(branch) if branch is not None else None
    items = [ItemOut.model_validate(i) for i in catalog.list_branch_items(db, request.branch_id)]

    return StreamingResponse(
        controller.stream(request.message, snapshot, items),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )
