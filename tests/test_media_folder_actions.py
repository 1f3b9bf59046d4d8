import uuid


def _hex() -> str:
    return uuid.uuid4().hex


def test_dissolve_with_non_existing_folder(client, api):
    r = client.post(f"{api}/_action/media-folder/{_hex()}/dissolve")
    assert r.status_code == 404
    assert r.json()["errors"][0]["code"] == "MEDIA_FOLDER_NOT_FOUND_EXCEPTION"


def test_dissolve(client, api, make_folder, store):
    folder_id = _hex()
    config_id = _hex()
    make_folder(
        id=folder_id,
        configuration={
            "id": config_id,
            "createThumbnails": True,
            "keepAspectRatio": True,
            "thumbnailQuality": 80,
        },
    )

    r = client.post(f"{api}/_action/media-folder/{folder_id}/dissolve")
    assert r.status_code == 200, r.text
    assert r.content == b""

    assert store.get_folder(folder_id) is None
    assert store.get_configuration(config_id) is None


def test_move_with_non_existing_target_folder(client, api, make_folder, store):
    parent = make_folder("parent")
    folder = make_folder("test", parentId=parent.id)

    r = client.post(f"{api}/_action/media-folder/{folder.id}/move/{_hex()}")
    assert r.status_code == 404
    assert r.json()["errors"][0]["code"] == "MEDIA_FOLDER_NOT_FOUND_EXCEPTION"
    assert store.get_folder(folder.id).parentId == parent.id


def test_move_with_non_existing_folder_to_move(client, api, make_folder):
    target = make_folder()

    r = client.post(f"{api}/_action/media-folder/{_hex()}/move/{target.id}")
    assert r.status_code == 404
    assert r.json()["errors"][0]["code"] == "MEDIA_FOLDER_NOT_FOUND_EXCEPTION"


def test_move(client, api, make_folder, store):
    folder = make_folder("test")
    target = make_folder("target")

    r = client.post(f"{api}/_action/media-folder/{folder.id}/move/{target.id}")
    assert r.status_code == 200, r.text
    assert r.content == b""
    assert store.get_folder(folder.id).parentId == target.id


def test_move_to_root(client, api, make_folder, store):
    parent = make_folder("test")
    folder = make_folder("target", parentId=parent.id)
    assert store.get_folder(folder.id).parentId == parent.id

    r = client.post(f"{api}/_action/media-folder/{folder.id}/move")
    assert r.status_code == 200, r.text
    assert r.content == b""
    assert store.get_folder(folder.id).parentId is None


def test_move_changes_only_parent(client, api, make_folder, store):
    folder = make_folder("test")
    target = make_folder("target")

    client.post(f"{api}/_action/media-folder/{folder.id}/move/{target.id}")
    moved = store.get_folder(folder.id)
    assert moved.name == "test"
    assert moved.configurationId == folder.configurationId
    assert moved.useParentConfiguration is False


def test_move_with_both_folders_missing_reports_folder_to_move(client, api):
    folder_id = _hex()
    r = client.post(f"{api}/_action/media-folder/{folder_id}/move/{_hex()}")
    assert r.status_code == 404
    assert folder_id in r.json()["errors"][0]["detail"]


def test_move_into_descendant_returns_400(client, api, make_folder, store):
    root = make_folder("root")
    child = make_folder("child", parentId=root.id)
    grandchild = make_folder("grandchild", parentId=child.id)

    r = client.post(f"{api}/_action/media-folder/{root.id}/move/{grandchild.id}")
    assert r.status_code == 400
    assert r.json()["errors"][0]["code"] == "MEDIA_FOLDER_CYCLIC_MOVE_EXCEPTION"
    assert store.get_folder(root.id).parentId is None


def test_move_into_itself_returns_400(client, api, make_folder):
    folder = make_folder()
    r = client.post(f"{api}/_action/media-folder/{folder.id}/move/{folder.id}")
    assert r.status_code == 400


def test_malformed_folder_id_is_not_found(client, api):
    r = client.post(f"{api}/_action/media-folder/not-a-uuid/dissolve")
    assert r.status_code == 404
    assert r.json()["errors"][0]["code"] == "MEDIA_FOLDER_NOT_FOUND_EXCEPTION"


def test_unsupported_api_version_returns_404(client, make_folder):
    folder = make_folder()
    r = client.post(f"/api/v99/_action/media-folder/{folder.id}/dissolve")
    assert r.status_code == 404
    assert r.json()["errors"][0]["code"] == "FRAMEWORK_INVALID_API_VERSION"


def test_dissolve_reparents_children_to_grandparent(client, api, make_folder, store):
    grandparent = make_folder("grandparent")
    parent = make_folder("parent", parentId=grandparent.id)
    child = make_folder("child", parentId=parent.id)

    r = client.post(f"{api}/_action/media-folder/{parent.id}/dissolve")
    assert r.status_code == 200

    assert store.get_folder(parent.id) is None
    assert store.get_configuration(parent.configurationId) is None
    assert store.get_folder(child.id).parentId == grandparent.id


def test_non_numeric_api_version_returns_404(client, make_folder, store):
    folder = make_folder()
    r = client.post(f"/api/vx/_action/media-folder/{folder.id}/dissolve")
    assert r.status_code == 404
    assert r.json()["errors"][0]["code"] == "FRAMEWORK_INVALID_API_VERSION"
    assert store.get_folder(folder.id) is not None
