from fastapi import APIRouter, Depends, Response

from mediafolder.dependencies import check_api_version, get_folder_service
from mediafolder.service import FolderService
from mediafolder.validation import safe_folder_id

router = APIRouter(
    prefix="/api/v{version}/_action/media-folder",
    tags=["media-folder-actions"],
    dependencies=[Depends(check_api_version)],
)


@router.post("/{folder_id}/dissolve")
def api_folder_dissolve(
    folder_id: str,
    service: FolderService = Depends(get_folder_service),
):
    service.dissolve(safe_folder_id(folder_id))
    return Response(status_code=200)


@router.post("/{folder_id}/move")
def api_folder_move_to_root(
    folder_id: str,
    service: FolderService = Depends(get_folder_service),
):
    service.move(safe_folder_id(folder_id))
    return Response(status_code=200)


@router.post("/{folder_id}/move/{target_id}")
def api_folder_move(
    folder_id: str,
    target_id: str,
    service: FolderService = Depends(get_folder_service),
):
    folder_id = safe_folder_id(folder_id)
    service.move(folder_id, safe_folder_id(target_id))
    return Response(status_code=200)
