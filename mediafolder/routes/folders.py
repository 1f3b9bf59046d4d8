from fastapi import APIRouter, Depends

from mediafolder.dependencies import check_api_version, get_folder_service
from mediafolder.models import CreateFolderPayload
from mediafolder.service import FolderService
from mediafolder.validation import safe_configuration_id, safe_folder_id

router = APIRouter(
    prefix="/api/v{version}",
    tags=["media-folder"],
    dependencies=[Depends(check_api_version)],
)


@router.post("/media-folder", status_code=201)
def api_folder_create(
    payload: CreateFolderPayload,
    service: FolderService = Depends(get_folder_service),
):
    return {"data": service.create_folder(payload).model_dump()}


@router.get("/media-folder/{folder_id}")
def api_folder_detail(
    folder_id: str,
    service: FolderService = Depends(get_folder_service),
):
    return {"data": service.get_folder(safe_folder_id(folder_id)).model_dump()}


@router.get("/media-folder-configuration/{configuration_id}")
def api_configuration_detail(
    configuration_id: str,
    service: FolderService = Depends(get_folder_service),
):
    configuration = service.get_configuration(safe_configuration_id(configuration_id))
    return {"data": configuration.model_dump()}
