# receipt_points/routes/receipts.py
from fastapi import APIRouter, Depends, HTTPException, Request

from ..schemas import PointsResponse, ProcessResponse, Receipt
from ..services.scoring import evaluate_receipt
from ..store import ScoreStore
from ..utils.logging import logger

router = APIRouter(prefix="/receipts", tags=["receipts"])

def get_store(request: Request) -> ScoreStore:
    return request.app.state.store

@router.post("/process", response_model=ProcessResponse)
def process_receipt(receipt: Receipt, store: ScoreStore = Depends(get_store)):
    result = evaluate_receipt(receipt)
    receipt_id = store.put(result["points"])
    logger.info("Receipt %s scored %s (%s)", receipt_id, result["points"],
                ", ".join(result["reasons"]) or "no rules hit")
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ScoreStore = Depends(get_store)):
    points = store.get(receipt_id)
    if points is None:
        logger.info("Lookup for unknown receipt %s", receipt_id)
        raise HTTPException(status_code=404, detail="Receipt not found")
    return PointsResponse(points=points)

# Registered last so the routes above win.
@router.get("/{receipt_path:path}", include_in_schema=False)
def invalid_path(receipt_path: str):
    if receipt_path == "process":
        raise HTTPException(status_code=405, detail="Only POST method is allowed",
                            headers={"Allow": "POST"})
    raise HTTPException(status_code=400, detail="Invalid request path")
