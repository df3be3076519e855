def normalize_version(version, include_document=False):
    data = {
        "id": version.id,
        "page_id": version.page_id,
        "version_number": version.version_number,
        "change_summary": version.change_summary,
        "created_by": version.created_by,
        "created_at": version.created_at.isoformat(),
    }

    # Listing leaves the document column unloaded; only single-version
    # reads ask for it.
    if include_document:
        data["document"] = version.document

    return data
