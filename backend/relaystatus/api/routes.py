from fastapi import APIRouter

from relaystatus.jobs.status_snapshot import build_snapshot
from relaystatus.registry.networks import NETWORKS
from relaystatus.schemas.status import Network, StatusSnapshot

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/api/networks", response_model=list[Network])
def list_networks() -> list[Network]:
    return list(NETWORKS)


@router.get("/api/status", response_model=StatusSnapshot)
async def status_endpoint() -> StatusSnapshot:
    # Per-network and pricing failures are reported inside the snapshot.
    return await build_snapshot()
